# measura.core.exponents
"""
Bounded exponent arithmetic.

Unit exponents live in a small closed range (``-4..4`` by default). Every
sum, difference or scaling of exponents either lands back inside that range
or fails with :class:`ExponentArithmeticError`; results are never clamped or
wrapped.

Sums and differences are answered from a precomputed table that is total
over ``D x D``. The same table is what an offline generator would serialise
into a static lookup artifact, so evaluating :func:`arithmetic_table`
directly is the ground truth for any such artifact.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Callable, Dict, Iterator, Literal, Mapping, Optional, Tuple

from measura.core.errors import ExponentArithmeticError

Operation = Literal["add", "sub"]
ArithmeticTable = Mapping[Tuple[int, int], Optional[int]]


def _is_int(value: object) -> bool:
    # bool is an int subclass but never a meaningful exponent
    return isinstance(value, int) and not isinstance(value, bool)


def _require_int(value: object, role: str) -> int:
    if not _is_int(value):
        raise TypeError(f"{role} must be an int, got {type(value).__name__}")
    return value  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class ExponentDomain:
    """
    Closed, ordered range of supported integer exponents.

    Attributes
    ----------
    minimum : int
        Smallest supported exponent (must be <= 0).
    maximum : int
        Largest supported exponent (must be >= 0).
    """

    minimum: int = -4
    maximum: int = 4

    def __post_init__(self) -> None:
        if not (_is_int(self.minimum) and _is_int(self.maximum)):
            raise TypeError("Exponent domain bounds must be integers")
        if not self.minimum <= 0 <= self.maximum:
            raise ValueError("Exponent domain must contain 0 (minimum <= 0 <= maximum)")

    def __contains__(self, value: object) -> bool:
        return _is_int(value) and self.minimum <= value <= self.maximum  # type: ignore[operator]

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.minimum, self.maximum + 1))

    def __len__(self) -> int:
        return self.maximum - self.minimum + 1

    @property
    def values(self) -> Tuple[int, ...]:
        return tuple(self)


DEFAULT_DOMAIN = ExponentDomain(-4, 4)

_COMPUTE: Dict[str, Callable[[int, int], int]] = {
    "add": lambda a, b: a + b,
    "sub": lambda a, b: a - b,
}


@lru_cache(maxsize=None)
def arithmetic_table(operation: Operation, domain: ExponentDomain = DEFAULT_DOMAIN) -> ArithmeticTable:
    """
    Return the total lookup table for ``operation`` over ``domain x domain``.

    Each key ``(left, right)`` maps to the in-domain result, or to ``None``
    when the true result falls outside the domain.

    >>> arithmetic_table("add")[(3, 1)]
    4
    >>> arithmetic_table("add")[(3, 2)] is None
    True
    """
    try:
        compute = _COMPUTE[operation]
    except KeyError:
        raise ValueError(f"Unknown exponent operation {operation!r}; use 'add' or 'sub'") from None

    table: Dict[Tuple[int, int], Optional[int]] = {}
    for left in domain:
        for right in domain:
            result = compute(left, right)
            table[(left, right)] = result if result in domain else None
    return MappingProxyType(table)


def _lookup(operation: Operation, left: object, right: object, domain: ExponentDomain) -> int:
    a = _require_int(left, "Exponent")
    b = _require_int(right, "Exponent")
    result = arithmetic_table(operation, domain).get((a, b))
    if result is None:
        raise ExponentArithmeticError(operation, a, b, domain)
    return result


def add_exponents(left: int, right: int, domain: ExponentDomain = DEFAULT_DOMAIN) -> int:
    """``left + right`` if it stays inside ``domain``; raises otherwise."""
    return _lookup("add", left, right, domain)


def sub_exponents(left: int, right: int, domain: ExponentDomain = DEFAULT_DOMAIN) -> int:
    """``left - right`` if it stays inside ``domain``; raises otherwise."""
    return _lookup("sub", left, right, domain)


def scale_exponent(exponent: int, factor: int, domain: ExponentDomain = DEFAULT_DOMAIN) -> int:
    """
    ``exponent * factor`` for any integer ``factor``.

    ``exponent`` must itself be in the domain. Raising to the zeroth power,
    or scaling a zero exponent, is always 0.
    """
    a = _require_int(exponent, "Exponent")
    k = _require_int(factor, "Scale factor")
    if a not in domain:
        raise ExponentArithmeticError("scale", a, k, domain)
    if k == 0 or a == 0:
        return 0
    if k == 1:
        return a
    result = a * k
    if result not in domain:
        raise ExponentArithmeticError("scale", a, k, domain)
    return result


def check_exponent(exponent: int, domain: ExponentDomain = DEFAULT_DOMAIN) -> int:
    """Validate a raw exponent for use in a unit vector."""
    a = _require_int(exponent, "Exponent")
    if a not in domain:
        raise ExponentArithmeticError("construct", a, None, domain)
    return a


__all__ = [
    "ExponentDomain",
    "DEFAULT_DOMAIN",
    "arithmetic_table",
    "add_exponents",
    "sub_exponents",
    "scale_exponent",
    "check_exponent",
]
