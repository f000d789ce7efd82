"""
measura.core.measure_type
=========================

Factories that bind one numeric backend and build measures on it.

A catalog of named quantities is meant to be written against a
:class:`MeasureType`::

    from measura.core.measure_type import FLOAT_MEASURES as M

    meters = M.dimension("length", "m")
    seconds = M.dimension("time", "s")
    feet = M.of(0.3048, meters, "ft")
    velocity = meters.per(seconds)

Every measure created through the same factory shares its backend, so they
can be freely combined.
"""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from measura.core.errors import MixedNumericBackendError
from measura.core.measure import Measure
from measura.core.numeric import (
    DECIMAL_OPERATIONS,
    FLOAT_OPERATIONS,
    FRACTION_OPERATIONS,
    NumericOperations,
)
from measura.core.unit import DIMENSIONLESS, Unit, UnitLike

N = TypeVar("N")


class MeasureType(Generic[N]):
    """Measure factory bound to a single :class:`NumericOperations` backend."""

    __slots__ = ("ops",)

    def __init__(self, ops: NumericOperations[N]) -> None:
        if not isinstance(ops, NumericOperations):
            raise TypeError(f"{ops!r} does not implement the numeric operations contract")
        self.ops = ops

    def __repr__(self) -> str:
        return f"MeasureType({self.ops!r})"

    def _own(self, measure: Measure[N]) -> Measure[N]:
        if not isinstance(measure, Measure):
            raise TypeError(f"Expected a Measure, got {type(measure).__name__}")
        if measure.ops is not self.ops:
            raise MixedNumericBackendError(self.ops, measure.ops)
        return measure

    # --- construction ---
    def create(self, value: N, unit: UnitLike, symbol: Optional[str] = None) -> Measure[N]:
        """Base measure from a raw value and a unit vector."""
        return Measure(value, unit, symbol, ops=self.ops)

    def dimensionless(self, value: N) -> Measure[N]:
        return Measure(value, DIMENSIONLESS, ops=self.ops)

    def dimension(self, name: str, symbol: Optional[str] = None) -> Measure[N]:
        """
        Unit measure of a new base dimension.

        The value is the backend's ``one()`` and the measure's display symbol
        is the same as the dimension's.
        """
        shown = symbol if symbol is not None else name
        return Measure(self.ops.one(), Unit.dimension(name, shown), shown, ops=self.ops)

    def of(self, value: N, quantity: Measure[N], symbol: Optional[str] = None) -> Measure[N]:
        """``value`` multiples of ``quantity``, e.g. ``of(0.3048, meters, "ft")``."""
        return self._own(quantity).scale(value).with_symbol(symbol)

    # --- reductions ---
    def sum(self, first: Measure[N], *rest: Measure[N]) -> Measure[N]:
        total = self._own(first)
        for m in rest:
            total = total.plus(self._own(m))
        return total

    def min(self, first: Measure[N], *rest: Measure[N]) -> Measure[N]:
        best = self._own(first)
        for m in rest:
            if self._own(m).lt(best):
                best = m
        return best

    def max(self, first: Measure[N], *rest: Measure[N]) -> Measure[N]:
        best = self._own(first)
        for m in rest:
            if self._own(m).gt(best):
                best = m
        return best

    def abs(self, measure: Measure[N]) -> Measure[N]:
        m = self._own(measure)
        zero = self.ops.sub(self.ops.one(), self.ops.one())
        return m.negate() if self.ops.compare(m.value, zero) < 0 else m.unsafe_map(lambda v: v)

    def is_measure(self, obj: Any) -> bool:
        """True for measures built on this factory's backend."""
        return isinstance(obj, Measure) and obj.ops is self.ops


FLOAT_MEASURES: MeasureType[float] = MeasureType(FLOAT_OPERATIONS)
DECIMAL_MEASURES = MeasureType(DECIMAL_OPERATIONS)
FRACTION_MEASURES = MeasureType(FRACTION_OPERATIONS)


__all__ = [
    "MeasureType",
    "FLOAT_MEASURES",
    "DECIMAL_MEASURES",
    "FRACTION_MEASURES",
]
