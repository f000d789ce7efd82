"""
measura.core.numeric
====================

The numeric-operations contract that lets a :class:`~measura.core.measure.Measure`
work over any number representation.

A backend is a stateless strategy object supplying ``one, neg, add, sub,
mult, div, pow, compare, format`` for one representation. Three are built
in (binary float, :class:`decimal.Decimal`, :class:`fractions.Fraction`);
more can be registered with :func:`register_operations`.
"""

from __future__ import annotations

import decimal
import logging
import math
import threading
from decimal import Decimal
from fractions import Fraction
from typing import Dict, Optional, Protocol, Type, TypeVar, runtime_checkable

from typing_extensions import override

logger = logging.getLogger(__name__)

N = TypeVar("N")


@runtime_checkable
class NumericOperations(Protocol[N]):
    """Primitives a number representation must provide to back a measure."""

    def one(self) -> N:
        """Multiplicative identity."""
        ...

    def neg(self, value: N) -> N: ...

    def add(self, left: N, right: N) -> N: ...

    def sub(self, left: N, right: N) -> N: ...

    def mult(self, left: N, right: N) -> N: ...

    def div(self, left: N, right: N) -> N: ...

    def pow(self, base: N, exponent: int) -> N: ...

    def compare(self, left: N, right: N) -> float:
        """
        Negative, zero or positive as ``left`` is below, equal to or above
        ``right``; NaN when the two are unordered (e.g. either is NaN).
        """
        ...

    def format(self, value: N) -> str: ...


class _PythonNumberOperations(NumericOperations[N]):
    """Shared implementation for types with native Python operators."""

    __slots__ = ()

    @override
    def neg(self, value: N) -> N:
        return -value  # type: ignore[operator]

    @override
    def add(self, left: N, right: N) -> N:
        return left + right  # type: ignore[operator]

    @override
    def sub(self, left: N, right: N) -> N:
        return left - right  # type: ignore[operator]

    @override
    def mult(self, left: N, right: N) -> N:
        return left * right  # type: ignore[operator]

    @override
    def div(self, left: N, right: N) -> N:
        return left / right  # type: ignore[operator]

    @override
    def pow(self, base: N, exponent: int) -> N:
        return base ** exponent  # type: ignore[operator]

    @override
    def compare(self, left: N, right: N) -> float:
        if left < right:  # type: ignore[operator]
            return -1
        if left > right:  # type: ignore[operator]
            return 1
        if left == right:
            return 0
        return math.nan

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class FloatOperations(_PythonNumberOperations[float]):
    """Binary floating point; values print with 15 significant digits."""

    __slots__ = ()

    @override
    def one(self) -> float:
        return 1.0

    @override
    def format(self, value: float) -> str:
        return f"{value:.15g}"


class FractionOperations(_PythonNumberOperations[Fraction]):
    """Exact rationals."""

    __slots__ = ()

    @override
    def one(self) -> Fraction:
        return Fraction(1)

    @override
    def format(self, value: Fraction) -> str:
        return str(value)


class DecimalOperations(NumericOperations[Decimal]):
    """
    Arbitrary-precision decimals.

    Arithmetic runs through ``context`` when one is given, otherwise through
    the thread's current decimal context at call time.
    """

    __slots__ = ("_context",)

    def __init__(self, context: Optional[decimal.Context] = None) -> None:
        self._context = context

    @property
    def context(self) -> decimal.Context:
        return self._context if self._context is not None else decimal.getcontext()

    @override
    def one(self) -> Decimal:
        return Decimal(1)

    @override
    def neg(self, value: Decimal) -> Decimal:
        return self.context.minus(value)

    @override
    def add(self, left: Decimal, right: Decimal) -> Decimal:
        return self.context.add(left, right)

    @override
    def sub(self, left: Decimal, right: Decimal) -> Decimal:
        return self.context.subtract(left, right)

    @override
    def mult(self, left: Decimal, right: Decimal) -> Decimal:
        return self.context.multiply(left, right)

    @override
    def div(self, left: Decimal, right: Decimal) -> Decimal:
        return self.context.divide(left, right)

    @override
    def pow(self, base: Decimal, exponent: int) -> Decimal:
        return self.context.power(base, exponent)

    @override
    def compare(self, left: Decimal, right: Decimal) -> float:
        result = self.context.compare(left, right)
        return math.nan if result.is_nan() else int(result)

    @override
    def format(self, value: Decimal) -> str:
        return str(value)

    def __repr__(self) -> str:
        return f"DecimalOperations(context={self._context!r})"


FLOAT_OPERATIONS = FloatOperations()
DECIMAL_OPERATIONS = DecimalOperations()
FRACTION_OPERATIONS = FractionOperations()


# ---------------------------------------------------------------------------
# Backend lookup by value type
# ---------------------------------------------------------------------------
_lock = threading.RLock()
_BACKENDS: Dict[type, NumericOperations] = {
    float: FLOAT_OPERATIONS,
    int: FLOAT_OPERATIONS,
    Decimal: DECIMAL_OPERATIONS,
    Fraction: FRACTION_OPERATIONS,
}


def register_operations(value_type: Type[N], operations: NumericOperations[N], replace: bool = False) -> None:
    """Make ``operations`` the default backend for values of ``value_type``."""
    if not isinstance(operations, NumericOperations):
        raise TypeError(f"{operations!r} does not implement the numeric operations contract")
    with _lock:
        if value_type in _BACKENDS and not replace:
            raise ValueError(
                f"Numeric operations for '{value_type.__name__}' are already registered; "
                "pass replace=True to override."
            )
        _BACKENDS[value_type] = operations
    logger.debug("registered numeric operations %r for %s", operations, value_type.__name__)


def operations_for(value: object) -> NumericOperations:
    """
    Resolve the default backend for a raw value.

    Lookup follows the value's MRO, so subclasses of a registered type share
    its backend. ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a numeric measure value")
    with _lock:
        for cls in type(value).__mro__:
            ops = _BACKENDS.get(cls)
            if ops is not None:
                return ops
    raise TypeError(
        f"No numeric operations registered for type '{type(value).__name__}'; "
        "pass ops= explicitly or call register_operations()."
    )


__all__ = [
    "NumericOperations",
    "FloatOperations",
    "DecimalOperations",
    "FractionOperations",
    "FLOAT_OPERATIONS",
    "DECIMAL_OPERATIONS",
    "FRACTION_OPERATIONS",
    "register_operations",
    "operations_for",
]
