from dataclasses import FrozenInstanceError
from decimal import Decimal
from fractions import Fraction

import pytest

from measura.core.measure import Measure
from measura.core.numeric import DECIMAL_OPERATIONS, FLOAT_OPERATIONS, FRACTION_OPERATIONS
from measura.core.unit import DIMENSIONLESS, Unit


def test_construction_from_plain_mapping():
    m = Measure(2.5, {"m": 1, "s": 0})
    assert isinstance(m.unit, Unit)
    assert m.unit == {"m": 1}
    assert m.value == 2.5
    assert m.symbol is None


@pytest.mark.parametrize("value, ops", [
    (1.0, FLOAT_OPERATIONS),
    (3, FLOAT_OPERATIONS),
    (Decimal("1.5"), DECIMAL_OPERATIONS),
    (Fraction(1, 3), FRACTION_OPERATIONS),
])
def test_backend_resolved_from_value(value, ops):
    assert Measure(value, DIMENSIONLESS).ops is ops


def test_explicit_backend_wins():
    m = Measure(2, DIMENSIONLESS, ops=FRACTION_OPERATIONS)
    assert m.ops is FRACTION_OPERATIONS


def test_bad_backend_and_symbol_rejected():
    with pytest.raises(TypeError):
        Measure(1.0, DIMENSIONLESS, ops=object())  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Measure(1.0, DIMENSIONLESS, 3)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Measure("1", DIMENSIONLESS)


def test_measure_is_immutable(meters):
    with pytest.raises(FrozenInstanceError):
        meters.value = 2  # type: ignore[misc]
    with pytest.raises(FrozenInstanceError):
        meters.symbol = "ft"  # type: ignore[misc]


def test_with_symbol_returns_new_measure(meters):
    feet = meters.scale(0.3048).with_symbol("ft")
    assert feet.symbol == "ft"
    assert feet.value == pytest.approx(0.3048)
    assert meters.symbol == "m"
    assert meters.with_symbol(None).symbol is None


def test_clone_is_equal_but_independent(meters):
    copy = meters.clone()
    assert copy is not meters
    assert copy == meters
    assert (copy.value, copy.unit, copy.symbol, copy.ops) == (meters.value, meters.unit, meters.symbol, meters.ops)


def test_unchanged_unit_is_shared(meters):
    assert meters.negate().unit is meters.unit
    assert meters.scale(3).unit is meters.unit


def test_derived_measures_drop_symbol(meters, seconds):
    assert meters.plus(meters).symbol is None
    assert meters.negate().symbol is None
    assert meters.over(seconds).symbol is None


def test_repr(meters):
    assert repr(meters) == "Measure(value=1, unit=Unit({'m': 1}), symbol='m')"


def test_equality_and_hash(meters):
    other = Measure(1.0, {"m": 1})
    assert meters == other               # symbol does not matter
    assert hash(meters) == hash(other)
    assert {meters, other} == {meters}
    assert meters != Measure(1.0, {"s": 1})
    assert Measure.__eq__(meters, 1) is NotImplemented
    assert (meters == 1) is False


def test_equality_across_backends_is_false():
    assert Measure(Fraction(1), {"m": 1}) != Measure(1.0, {"m": 1})
