"""
measura.core.errors
===================

Exception types raised by the unit-arithmetic engine.

Every error carries the structured pieces needed to build a message
(offending dimension, the exponents involved, the mismatched units), so
callers never have to parse the message text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from measura.core.exponents import ExponentDomain


class MeasuraError(Exception):
    """Base class for all measura errors."""


class ExponentArithmeticError(MeasuraError, ArithmeticError):
    """
    An exponent operation produced a value outside the supported domain.

    Attributes
    ----------
    operation : str
        One of "add", "sub", "scale" or "construct".
    left, right : int
        The operands of the failed operation (``right`` is the scale factor
        for "scale" and ``None`` for "construct").
    domain : ExponentDomain
        The domain the result had to fall into.
    dimension : str | None
        The unit dimension being computed, when known.
    """

    def __init__(
        self,
        operation: str,
        left: int,
        right: int | None,
        domain: "ExponentDomain",
        dimension: str | None = None,
    ) -> None:
        self.operation = operation
        self.left = left
        self.right = right
        self.domain = domain
        self.dimension = dimension
        super().__init__(self._message())

    def _message(self) -> str:
        where = f" in dimension '{self.dimension}'" if self.dimension is not None else ""
        bounds = f"[{self.domain.minimum}, {self.domain.maximum}]"
        if self.operation == "construct":
            return f"Exponent {self.left}{where} is outside the supported range {bounds}"
        symbol = {"add": "+", "sub": "-", "scale": "*"}.get(self.operation, self.operation)
        return (
            f"Exponent arithmetic {self.left} {symbol} {self.right}{where} "
            f"leaves the supported range {bounds}"
        )

    def for_dimension(self, dimension: str) -> "ExponentArithmeticError":
        """Return the same error, attributed to ``dimension``."""
        return type(self)(self.operation, self.left, self.right, self.domain, dimension)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.operation, self.left, self.right, self.domain, self.dimension))


class UnitMismatchError(MeasuraError, TypeError):
    """An operation that needs identical units received incompatible ones."""

    def __init__(self, operation: str, left: Any, right: Any) -> None:
        self.operation = operation
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot {operation} measures with different units: {left!r} and {right!r}"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.operation, self.left, self.right))


class MixedNumericBackendError(MeasuraError, TypeError):
    """Two measures built on different numeric-operations instances were combined."""

    def __init__(self, left: Any, right: Any) -> None:
        self.left = left
        self.right = right
        super().__init__(
            "Cannot combine measures backed by different numeric operations: "
            f"{left!r} and {right!r}"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.left, self.right))


__all__ = [
    "MeasuraError",
    "ExponentArithmeticError",
    "UnitMismatchError",
    "MixedNumericBackendError",
]
