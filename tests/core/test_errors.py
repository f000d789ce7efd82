import decimal
import pickle

import pytest

from measura.core.errors import (
    ExponentArithmeticError,
    MeasuraError,
    MixedNumericBackendError,
    UnitMismatchError,
)
from measura.core.exponents import DEFAULT_DOMAIN, ExponentDomain
from measura.core.numeric import DECIMAL_OPERATIONS, FLOAT_OPERATIONS, DecimalOperations
from measura.core.unit import Unit


@pytest.mark.parametrize("cls, bases", [
    (ExponentArithmeticError, (MeasuraError, ArithmeticError)),
    (UnitMismatchError, (MeasuraError, TypeError)),
    (MixedNumericBackendError, (MeasuraError, TypeError)),
])
def test_hierarchy(cls, bases):
    assert issubclass(cls, bases)


def test_exponent_error_message_and_fields():
    err = ExponentArithmeticError("add", 3, 2, DEFAULT_DOMAIN)
    assert str(err) == "Exponent arithmetic 3 + 2 leaves the supported range [-4, 4]"
    named = err.for_dimension("m")
    assert named.dimension == "m"
    assert (named.operation, named.left, named.right) == ("add", 3, 2)
    assert str(named) == "Exponent arithmetic 3 + 2 in dimension 'm' leaves the supported range [-4, 4]"


def test_construct_error_message():
    err = ExponentArithmeticError("construct", 7, None, ExponentDomain(-2, 2), "s")
    assert str(err) == "Exponent 7 in dimension 's' is outside the supported range [-2, 2]"


def test_unit_mismatch_message():
    err = UnitMismatchError("add", Unit({"m": 1}), Unit({"s": 1}))
    assert "add" in str(err)
    assert "Unit({'m': 1})" in str(err)


def test_mixed_backend_message():
    err = MixedNumericBackendError(FLOAT_OPERATIONS, DECIMAL_OPERATIONS)
    assert "FloatOperations" in str(err) and "DecimalOperations" in str(err)


@pytest.mark.regression(reason="two contexts of the same backend class must be told apart")
def test_mixed_backend_message_shows_contexts():
    precise = DecimalOperations(decimal.Context(prec=40))
    err = MixedNumericBackendError(DECIMAL_OPERATIONS, precise)
    assert repr(DECIMAL_OPERATIONS) in str(err)
    assert repr(precise) in str(err)
    assert "prec=40" in str(err)


@pytest.mark.parametrize("err", [
    ExponentArithmeticError("scale", 4, 2, DEFAULT_DOMAIN, "m"),
    UnitMismatchError("compare", Unit({"m": 1}), Unit({"s": 1})),
    MixedNumericBackendError(FLOAT_OPERATIONS, DECIMAL_OPERATIONS),
])
def test_errors_pickle(err):
    clone = pickle.loads(pickle.dumps(err))
    assert type(clone) is type(err)
    assert str(clone) == str(err)
