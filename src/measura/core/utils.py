"""
measura.core.utils
==================

Formatting helpers for unit vectors.

:func:`format_unit` is the plain-ASCII rendering used by ``str()`` on units
and measures (e.g. ``'kg * m / s^2'``). Its grouping and ordering are a
display contract: documentation and error messages are checked against it
verbatim.

:func:`prettify_unit` renders the same grouping in a scientific style with
middle dots and unicode superscripts (e.g. ``'kg·m/s²'``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from measura.core.unit import Unit

SymbolAndExponent = Tuple[str, int]

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")


def _sup(n: int) -> str:
    return "" if n == 1 else str(n).translate(_SUPERSCRIPTS)


def _split(unit: "Unit") -> Tuple[List[SymbolAndExponent], List[SymbolAndExponent]]:
    """Non-zero (symbol, exponent) pairs, split by sign and sorted by symbol."""
    present = sorted(
        ((symbol, exponent) for _, symbol, exponent in unit.dimensions_with_symbols() if exponent != 0),
        key=lambda pair: pair[0],
    )
    positive = [(s, e) for s, e in present if e > 0]
    negative = [(s, e) for s, e in present if e < 0]
    return positive, negative


def _join(parts: List[SymbolAndExponent]) -> str:
    return " * ".join(f"{s}^{e}" if e != 1 else s for s, e in parts)


def format_unit(unit: "Unit") -> str:
    """
    Render a unit as ``'<numerator> / <denominator>'``.

    >>> from measura.core.unit import Unit
    >>> format_unit(Unit({"kg": 1, "m": 1, "s": -2}))
    'kg * m / s^2'
    >>> format_unit(Unit({"m": 1, "s": -1, "kg": -1}))
    'm / (kg * s)'
    >>> format_unit(Unit({"s": -1}))
    's^-1'
    >>> format_unit(Unit())
    ''
    """
    positive, negative = _split(unit)

    if not positive and not negative:
        return ""
    if not positive:
        # nothing to divide from; keep the negative exponents as written
        return _join(negative)

    numerator = _join(positive)
    if not negative:
        return numerator

    denominator = _join([(s, -e) for s, e in negative])
    if len(negative) > 1:
        denominator = f"({denominator})"
    return f"{numerator} / {denominator}"


def prettify_unit(unit: "Unit") -> str:
    """
    Scientific-style rendering with middle dots and superscripts.

    >>> from measura.core.unit import Unit
    >>> prettify_unit(Unit({"kg": 1, "m": 1, "s": -2}))
    'kg·m/s²'
    >>> prettify_unit(Unit({"s": -1}))
    '1/s'
    """
    positive, negative = _split(unit)

    def join(parts: List[SymbolAndExponent]) -> str:
        return "·".join(f"{s}{_sup(e)}" for s, e in parts)

    if not positive and not negative:
        return ""

    numerator = join(positive) if positive else "1"
    if not negative:
        return numerator

    denominator = join([(s, -e) for s, e in negative])
    if len(negative) > 1:
        denominator = f"({denominator})"
    return f"{numerator}/{denominator}"


__all__ = ["format_unit", "prettify_unit"]
