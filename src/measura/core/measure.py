"""
measura.core.measure
====================

Defines :class:`Measure`, a numeric value tagged with a unit vector.

A measure is generic over its number representation: all arithmetic on the
value goes through the :class:`~measura.core.numeric.NumericOperations`
backend captured at construction, and all arithmetic on the unit goes
through :mod:`measura.core.unit`, so an illegal unit shape is rejected before
any value is produced.

The system supports:
- Addition, subtraction and comparison of measures with identical units.
- Multiplication, division and integer powers, deriving the result unit.
- Scaling by dimensionless numbers and display in several styles.

Measures are immutable; every operation returns a new instance.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Optional, TypeVar

from measura.core.errors import ExponentArithmeticError, MixedNumericBackendError, UnitMismatchError
from measura.core.exponents import DEFAULT_DOMAIN
from measura.core.numeric import NumericOperations, operations_for
from measura.core.unit import (
    Unit,
    UnitLike,
    allowed_exponents,
    as_unit,
    divide_units,
    exponentiate_unit,
    is_compatible,
    multiply_units,
)
from measura.core.utils import format_unit, prettify_unit

N = TypeVar("N")


def _is_scalar(value: object) -> bool:
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True, eq=False)
class Measure(Generic[N]):
    """
    A value with a unit of measurement.

    Attributes
    ----------
    value : N
        The magnitude, in whatever representation the backend handles.
    unit : Unit
        The unit vector. Plain mappings are accepted and converted.
    symbol : str | None
        Optional display name of the unit this measure stands for
        (e.g. ``"ft"`` for a measure of 0.3048 m).
    ops : NumericOperations[N]
        Backend used for every value operation. Resolved from the type of
        ``value`` when omitted.

    Examples
    --------
    >>> meters = Measure(1, {"m": 1}, "m")
    >>> seconds = Measure(1, {"s": 1}, "s")
    >>> str(meters.over(seconds))
    '1 m / s'
    """

    value: N
    unit: Unit
    symbol: Optional[str] = None
    ops: NumericOperations[N] = field(default=None, repr=False, kw_only=True)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "unit", as_unit(self.unit))
        if self.symbol is not None and not isinstance(self.symbol, str):
            raise TypeError(f"Measure symbol must be a string or None, got {type(self.symbol).__name__}")
        if self.ops is None:
            object.__setattr__(self, "ops", operations_for(self.value))
        elif not isinstance(self.ops, NumericOperations):
            raise TypeError(f"{self.ops!r} does not implement the numeric operations contract")

    # --- internal helpers ---
    def _new(self, value: N, unit: Optional[Unit] = None) -> "Measure[N]":
        return Measure(value, self.unit if unit is None else unit, ops=self.ops)

    def _check_backend(self, other: object) -> "Measure[N]":
        if not isinstance(other, Measure):
            raise TypeError(f"Expected a Measure, got {type(other).__name__}")
        if other.ops is not self.ops:
            raise MixedNumericBackendError(self.ops, other.ops)
        return other

    def _check_unit(self, other: object, operation: str) -> "Measure[N]":
        checked = self._check_backend(other)
        if not is_compatible(self.unit, checked.unit):
            raise UnitMismatchError(operation, self.unit, checked.unit)
        return checked

    # --- same-unit arithmetic ---
    def plus(self, other: "Measure[N]") -> "Measure[N]":
        """Sum of two measures with the same unit; keeps this measure's unit."""
        o = self._check_unit(other, "add")
        return self._new(self.ops.add(self.value, o.value))

    def minus(self, other: "Measure[N]") -> "Measure[N]":
        o = self._check_unit(other, "subtract")
        return self._new(self.ops.sub(self.value, o.value))

    def negate(self) -> "Measure[N]":
        return self._new(self.ops.neg(self.value))

    def scale(self, factor: N) -> "Measure[N]":
        """Multiply the value by a dimensionless factor."""
        return self._new(self.ops.mult(self.value, factor))

    # --- unit-changing arithmetic ---
    def times(self, other: "Measure[N]") -> "Measure[N]":
        o = self._check_backend(other)
        unit = multiply_units(self.unit, o.unit)
        return self._new(self.ops.mult(self.value, o.value), unit)

    def over(self, other: "Measure[N]") -> "Measure[N]":
        o = self._check_backend(other)
        unit = divide_units(self.unit, o.unit)
        return self._new(self.ops.div(self.value, o.value), unit)

    per = over
    div = over

    def to_the(self, exponent: int) -> "Measure[N]":
        """
        Raise this measure to an integer power.

        The power must lie in the exponent domain and keep every dimension of
        the unit inside it; otherwise :class:`ExponentArithmeticError`.
        """
        if not isinstance(exponent, int) or isinstance(exponent, bool):
            raise TypeError(f"Measure exponent must be an int, got {type(exponent).__name__}")
        if exponent not in DEFAULT_DOMAIN:
            raise ExponentArithmeticError("construct", exponent, None, DEFAULT_DOMAIN)
        unit = exponentiate_unit(self.unit, exponent)
        return self._new(self.ops.pow(self.value, exponent), unit)

    @property
    def squared(self) -> Callable[[], "Measure[N]"]:
        """``m.squared()``; absent (``AttributeError``) when the unit cannot be squared."""
        if 2 not in allowed_exponents(self.unit):
            raise AttributeError(f"A measure in '{self.unit}' cannot be squared")
        return lambda: self.to_the(2)

    @property
    def cubed(self) -> Callable[[], "Measure[N]"]:
        """``m.cubed()``; absent (``AttributeError``) when the unit cannot be cubed."""
        if 3 not in allowed_exponents(self.unit):
            raise AttributeError(f"A measure in '{self.unit}' cannot be cubed")
        return lambda: self.to_the(3)

    def inverse(self) -> "Measure[N]":
        return self.to_the(-1)

    reciprocal = inverse

    def unsafe_map(
        self,
        value_fn: Callable[[N], N],
        unit_fn: Optional[Callable[[Unit], UnitLike]] = None,
    ) -> "Measure[N]":
        """
        Transform the value, and optionally the unit, with no compatibility
        checks at all. Meant for trusted helpers such as unit conversions.
        """
        unit = self.unit if unit_fn is None else as_unit(unit_fn(self.unit))
        return self._new(value_fn(self.value), unit)

    # --- comparison ---
    def compare(self, other: "Measure[N]") -> float:
        """
        Sign of ``self - other``: negative, zero or positive.

        NaN when the values are unordered, so every named comparison except
        :meth:`neq` is False for a NaN operand.
        """
        o = self._check_unit(other, "compare")
        return self.ops.compare(self.value, o.value)

    def lt(self, other: "Measure[N]") -> bool:
        return self.compare(other) < 0

    def lte(self, other: "Measure[N]") -> bool:
        return self.compare(other) <= 0

    def eq(self, other: "Measure[N]") -> bool:
        return self.compare(other) == 0

    def neq(self, other: "Measure[N]") -> bool:
        return self.compare(other) != 0

    def gte(self, other: "Measure[N]") -> bool:
        return self.compare(other) >= 0

    def gt(self, other: "Measure[N]") -> bool:
        return self.compare(other) > 0

    # --- symbols and copies ---
    def with_symbol(self, symbol: Optional[str]) -> "Measure[N]":
        return Measure(self.value, self.unit, symbol, ops=self.ops)

    def clone(self) -> "Measure[N]":
        return Measure(self.value, self.unit, self.symbol, ops=self.ops)

    # --- display ---
    def __str__(self) -> str:
        value = self.ops.format(self.value)
        unit = format_unit(self.unit)
        return f"{value} {unit}" if unit else value

    def in_(self, unit: "Measure[N]") -> str:
        """
        Format this measure as a multiple of ``unit``.

        Falls back to ``str(self)`` when ``unit`` has no symbol.

        >>> meters = Measure(1.0, {"m": 1}, "m")
        >>> feet = Measure(0.3048, {"m": 1}, "ft")
        >>> meters.scale(3.048).in_(feet)
        '10 ft'
        """
        u = self._check_unit(unit, "express")
        if u.symbol is None:
            return str(self)
        return f"{self.ops.format(self.ops.div(self.value, u.value))} {u.symbol}"

    def __format__(self, spec: str) -> str:
        """
        Custom string formatting for Measure objects.

        Supported specifiers
        --------------------
        "" (empty)
            Same as ``str()``: ``'9.8 m / s^2'``.
        "pretty"
            Middle dots and superscripts: ``'9.8 m/s²'``.
        """
        spec = (spec or "").strip().lower()
        if spec == "":
            return str(self)
        if spec == "pretty":
            value = self.ops.format(self.value)
            unit = prettify_unit(self.unit)
            return f"{value} {unit}" if unit else value
        raise ValueError("Unknown format spec; use '' or 'pretty'")

    # --- operator overloads ---
    def __add__(self, other: object) -> "Measure[N]":
        if not isinstance(other, Measure):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> "Measure[N]":
        if not isinstance(other, Measure):
            return NotImplemented
        return self.minus(other)

    def __neg__(self) -> "Measure[N]":
        return self.negate()

    def __mul__(self, other: object) -> "Measure[N]":
        if isinstance(other, Measure):
            return self.times(other)
        if _is_scalar(other):
            return self.scale(other)  # type: ignore[arg-type]
        return NotImplemented

    def __rmul__(self, other: object) -> "Measure[N]":
        # allows 3 * (2 m) -> 6 m
        if _is_scalar(other):
            return self.scale(other)  # type: ignore[arg-type]
        return NotImplemented

    def __truediv__(self, other: object) -> "Measure[N]":
        if isinstance(other, Measure):
            return self.over(other)
        if _is_scalar(other):
            return self._new(self.ops.div(self.value, other))  # type: ignore[arg-type]
        return NotImplemented

    def __rtruediv__(self, other: object) -> "Measure[N]":
        # scalar / measure -> reciprocal unit
        if not _is_scalar(other):
            return NotImplemented
        unit = exponentiate_unit(self.unit, -1)
        return self._new(self.ops.div(other, self.value), unit)  # type: ignore[arg-type]

    def __pow__(self, exponent: int, modulo: Any = None) -> "Measure[N]":
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for Measure.")
        return self.to_the(exponent)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        return self.gte(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        # different backend or unit: never equal, but not an error either
        if other.ops is not self.ops or not is_compatible(self.unit, other.unit):
            return False
        return self.ops.compare(self.value, other.value) == 0

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self) -> int:
        return hash((self.value, self.unit))


__all__ = ["Measure"]
