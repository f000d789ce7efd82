"""
measura.core.unit
=================

Unit vectors: sparse mappings from dimension name to an integer exponent,
each dimension also carrying a display symbol.

Exponent arithmetic is delegated to :mod:`measura.core.exponents`, so every
unit built here only ever holds in-domain exponents. Zero exponents are
dropped on construction (canonical sparse form), which makes equality a plain
comparison of the remaining ``(dimension, exponent)`` pairs. Symbols are for
display only and never take part in equality or hashing.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Callable, Dict, Iterator, Tuple, Union

from measura.core.errors import ExponentArithmeticError
from measura.core.exponents import (
    DEFAULT_DOMAIN,
    ExponentDomain,
    add_exponents,
    check_exponent,
    scale_exponent,
    sub_exponents,
)

logger = logging.getLogger(__name__)

# A dimension maps to either a bare exponent (symbol = dimension name)
# or an explicit (symbol, exponent) pair.
DimensionSpec = Union[int, Tuple[str, int]]
UnitLike = Union["Unit", Mapping[str, DimensionSpec]]


class Unit(Mapping[str, int]):
    """
    Immutable unit vector.

    Behaves as a read-only ``Mapping[str, int]`` over its non-zero
    exponents:

    >>> newton = Unit({"kg": 1, "m": 1, "s": -2})
    >>> newton["s"], newton.exponent("mol")
    (-2, 0)
    >>> newton == {"m": 1, "kg": 1, "s": -2, "mol": 0}
    True
    """

    __slots__ = ("_exponents", "_symbols")

    def __init__(
        self,
        dimensions: UnitLike | None = None,
        *,
        domain: ExponentDomain = DEFAULT_DOMAIN,
    ) -> None:
        exponents: Dict[str, int] = {}
        symbols: Dict[str, str] = {}

        if isinstance(dimensions, Unit):
            exponents.update(dimensions._exponents)
            symbols.update(dimensions._symbols)
        elif dimensions is not None:
            if not isinstance(dimensions, Mapping):
                raise TypeError(f"Unit expects a mapping, got {type(dimensions).__name__}")
            for name, spec in dimensions.items():
                if not isinstance(name, str) or not name:
                    raise TypeError("Dimension names must be non-empty strings")
                if isinstance(spec, tuple):
                    symbol, exponent = spec
                    if not isinstance(symbol, str):
                        raise TypeError(f"Symbol for dimension '{name}' must be a string")
                else:
                    symbol, exponent = name, spec
                try:
                    check_exponent(exponent, domain)
                except ExponentArithmeticError as exc:
                    raise exc.for_dimension(name) from exc
                if exponent != 0:
                    exponents[name] = exponent
                    symbols[name] = symbol

        self._exponents = exponents
        self._symbols = symbols

    @classmethod
    def _from_parts(cls, exponents: Dict[str, int], symbols: Dict[str, str]) -> "Unit":
        # Trusted path: callers have already validated and canonicalised.
        unit = cls.__new__(cls)
        unit._exponents = exponents
        unit._symbols = symbols
        return unit

    @classmethod
    def dimension(cls, name: str, symbol: str | None = None) -> "Unit":
        """A base unit with exponent 1 along a single dimension."""
        return cls({name: (symbol if symbol is not None else name, 1)})

    # --- Mapping protocol ---
    def __getitem__(self, dimension: str) -> int:
        return self._exponents[dimension]

    def __iter__(self) -> Iterator[str]:
        return iter(self._exponents)

    def __len__(self) -> int:
        return len(self._exponents)

    # --- Queries ---
    def exponent(self, dimension: str) -> int:
        """Exponent of ``dimension``; 0 when absent."""
        return self._exponents.get(dimension, 0)

    def symbol(self, dimension: str) -> str:
        """Display symbol of ``dimension``; the dimension name when absent."""
        return self._symbols.get(dimension, dimension)

    def dimensions_with_symbols(self) -> Iterator[Tuple[str, str, int]]:
        """Yield ``(dimension, symbol, exponent)`` for every non-zero dimension."""
        for name, exponent in self._exponents.items():
            yield name, self._symbols[name], exponent

    def with_symbols(self, **symbols: str) -> "Unit":
        """Return this unit with some display symbols replaced."""
        unknown = set(symbols) - set(self._exponents)
        if unknown:
            raise KeyError(f"Unit has no dimension(s) {sorted(unknown)}")
        return Unit._from_parts(dict(self._exponents), {**self._symbols, **symbols})

    @property
    def is_dimensionless(self) -> bool:
        return not self._exponents

    # --- Algebra (operator overloads) ---
    def __mul__(self, other: object) -> "Unit":
        if not isinstance(other, Mapping):
            return NotImplemented
        return multiply_units(self, other)

    def __truediv__(self, other: object) -> "Unit":
        if not isinstance(other, Mapping):
            return NotImplemented
        return divide_units(self, other)

    def __rtruediv__(self, n: object) -> "Unit":
        if n != 1 or isinstance(n, bool):
            raise TypeError(
                f"Invalid operation: cannot divide {n!r} by a Unit ({self}). "
                "Only 1/unit (reciprocal) is supported."
            )
        return exponentiate_unit(self, -1)

    def __pow__(self, n: int, modulo: object = None) -> "Unit":
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for Unit.")
        return exponentiate_unit(self, n)

    # --- Identity ---
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Unit):
            return self._exponents == other._exponents
        if isinstance(other, Mapping):
            return self._exponents == {k: v for k, v in other.items() if v != 0}
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self) -> int:
        return hash(frozenset(self._exponents.items()))

    def __repr__(self) -> str:
        parts = []
        for name, symbol, exponent in self.dimensions_with_symbols():
            spec = repr(exponent) if symbol == name else repr((symbol, exponent))
            parts.append(f"{name!r}: {spec}")
        return "Unit({" + ", ".join(parts) + "})"

    def __str__(self) -> str:
        from measura.core.utils import format_unit

        return format_unit(self)


DIMENSIONLESS = Unit()


def as_unit(value: UnitLike, domain: ExponentDomain = DEFAULT_DOMAIN) -> Unit:
    """Coerce a plain mapping into a :class:`Unit` checked against ``domain``; units pass through."""
    if isinstance(value, Unit):
        return value
    return Unit(value, domain=domain)


def _combine(
    left: UnitLike,
    right: UnitLike,
    op: Callable[[int, int, ExponentDomain], int],
    domain: ExponentDomain,
) -> Unit:
    lu, ru = as_unit(left, domain), as_unit(right, domain)
    exponents: Dict[str, int] = {}
    symbols: Dict[str, str] = {}

    # ordered union: left dimensions first, then new ones from the right
    for name in dict.fromkeys([*lu, *ru]):
        try:
            result = op(lu.exponent(name), ru.exponent(name), domain)
        except ExponentArithmeticError as exc:
            logger.debug("unit algebra failed in dimension %r: %s", name, exc)
            raise exc.for_dimension(name) from exc
        if result != 0:
            exponents[name] = result
            symbols[name] = lu.symbol(name) if name in lu else ru.symbol(name)

    return Unit._from_parts(exponents, symbols)


def multiply_units(left: UnitLike, right: UnitLike, domain: ExponentDomain = DEFAULT_DOMAIN) -> Unit:
    """Pointwise sum of exponents."""
    return _combine(left, right, add_exponents, domain)


def divide_units(left: UnitLike, right: UnitLike, domain: ExponentDomain = DEFAULT_DOMAIN) -> Unit:
    """Pointwise difference of exponents."""
    return _combine(left, right, sub_exponents, domain)


def exponentiate_unit(unit: UnitLike, power: int, domain: ExponentDomain = DEFAULT_DOMAIN) -> Unit:
    """
    Scale every exponent by ``power``.

    ``power == 0`` gives the dimensionless unit; any dimension leaving the
    domain fails the whole operation.
    """
    if not isinstance(power, int) or isinstance(power, bool):
        raise TypeError(f"Unit exponent must be an int, got {type(power).__name__}")
    u = as_unit(unit, domain)
    exponents: Dict[str, int] = {}
    for name, exponent in u.items():
        try:
            result = scale_exponent(exponent, power, domain)
        except ExponentArithmeticError as exc:
            logger.debug("unit algebra failed in dimension %r: %s", name, exc)
            raise exc.for_dimension(name) from exc
        if result != 0:
            exponents[name] = result
    return Unit._from_parts(exponents, {name: u.symbol(name) for name in exponents})


def is_compatible(left: UnitLike, right: UnitLike) -> bool:
    """True when both units have the same canonical exponents."""
    return as_unit(left) == as_unit(right)


def allowed_exponents(unit: UnitLike, domain: ExponentDomain = DEFAULT_DOMAIN) -> Tuple[int, ...]:
    """In-domain powers ``k`` for which ``exponentiate_unit(unit, k)`` succeeds."""
    exponents = list(as_unit(unit, domain).values())
    return tuple(k for k in domain if all(e * k in domain for e in exponents))


__all__ = [
    "Unit",
    "DIMENSIONLESS",
    "as_unit",
    "multiply_units",
    "divide_units",
    "exponentiate_unit",
    "is_compatible",
    "allowed_exponents",
]
