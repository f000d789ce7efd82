# tests/conftest.py
import pytest

from measura.core.measure import Measure
from measura.core.unit import Unit


@pytest.fixture
def meters():
    return Measure(1, Unit.dimension("m"), "m")


@pytest.fixture
def seconds():
    return Measure(1, Unit.dimension("s"), "s")


@pytest.fixture
def kilograms():
    return Measure(1, Unit.dimension("kg"), "kg")
