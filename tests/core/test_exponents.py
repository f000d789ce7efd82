import itertools

import pytest

from measura.core.errors import ExponentArithmeticError
from measura.core.exponents import (
    DEFAULT_DOMAIN,
    ExponentDomain,
    add_exponents,
    arithmetic_table,
    check_exponent,
    scale_exponent,
    sub_exponents,
)


@pytest.mark.regression(reason="module-level DEFAULT_DOMAIN must build at import time")
def test_module_executes_from_scratch():
    import importlib.util

    found = importlib.util.find_spec("measura.core.exponents")
    fresh = importlib.util.module_from_spec(found)
    found.loader.exec_module(fresh)
    assert (fresh.DEFAULT_DOMAIN.minimum, fresh.DEFAULT_DOMAIN.maximum) == (-4, 4)
    assert fresh.add_exponents(1, 2) == 3


# -------------------------------
# Domain
# -------------------------------

def test_default_domain_bounds_and_order():
    assert DEFAULT_DOMAIN.values == (-4, -3, -2, -1, 0, 1, 2, 3, 4)
    assert len(DEFAULT_DOMAIN) == 9
    assert list(DEFAULT_DOMAIN) == sorted(DEFAULT_DOMAIN)


@pytest.mark.parametrize("value, expected", [
    (0, True),
    (4, True),
    (-4, True),
    (5, False),
    (-5, False),
    (1.0, False),     # floats are never exponents
    (True, False),    # nor are bools
    ("1", False),
])
def test_domain_membership(value, expected):
    assert (value in DEFAULT_DOMAIN) is expected


@pytest.mark.parametrize("lo, hi", [(1, 3), (-3, -1), (2, -2)])
def test_domain_must_contain_zero(lo, hi):
    with pytest.raises(ValueError):
        ExponentDomain(lo, hi)


def test_domain_bounds_must_be_ints():
    with pytest.raises(TypeError):
        ExponentDomain(-4.0, 4)  # type: ignore[arg-type]


def test_domain_is_hashable_and_frozen():
    d = ExponentDomain(-2, 2)
    assert hash(d) == hash(ExponentDomain(-2, 2))
    with pytest.raises(AttributeError):
        d.minimum = -3  # type: ignore[misc]


# -------------------------------
# Totality of add / sub over D x D
# -------------------------------

@pytest.mark.parametrize("op, fn, py", [
    ("add", add_exponents, lambda a, b: a + b),
    ("sub", sub_exponents, lambda a, b: a - b),
])
def test_total_over_domain_pairs(op, fn, py):
    for a, b in itertools.product(DEFAULT_DOMAIN, repeat=2):
        expected = py(a, b)
        if expected in DEFAULT_DOMAIN:
            assert fn(a, b) == expected
        else:
            with pytest.raises(ExponentArithmeticError) as info:
                fn(a, b)
            err = info.value
            assert (err.operation, err.left, err.right) == (op, a, b)
            assert err.domain == DEFAULT_DOMAIN


@pytest.mark.parametrize("op", ["add", "sub"])
def test_table_covers_every_pair(op):
    table = arithmetic_table(op)
    assert len(table) == len(DEFAULT_DOMAIN) ** 2
    for (a, b), result in table.items():
        assert result is None or result in DEFAULT_DOMAIN


def test_table_matches_direct_evaluation():
    add = arithmetic_table("add")
    assert add[(3, 1)] == 4
    assert add[(3, 2)] is None
    assert add[(-4, 4)] == 0
    sub = arithmetic_table("sub")
    assert sub[(-4, 1)] is None
    assert sub[(2, 4)] == -2


def test_table_is_read_only_and_cached():
    table = arithmetic_table("add")
    assert arithmetic_table("add") is table
    with pytest.raises(TypeError):
        table[(0, 0)] = 1  # type: ignore[index]


def test_table_unknown_operation():
    with pytest.raises(ValueError):
        arithmetic_table("mul")  # type: ignore[arg-type]


def test_custom_domain_changes_the_boundary():
    small = ExponentDomain(-1, 1)
    with pytest.raises(ExponentArithmeticError):
        add_exponents(1, 1, small)
    assert add_exponents(1, 1) == 2


def test_out_of_domain_operands_fail():
    with pytest.raises(ExponentArithmeticError):
        add_exponents(5, -1)
    with pytest.raises(ExponentArithmeticError):
        sub_exponents(0, -7)


def test_non_int_operands_are_type_errors():
    with pytest.raises(TypeError):
        add_exponents(1.0, 1)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        sub_exponents(1, True)


# -------------------------------
# Scaling (D x Z)
# -------------------------------

@pytest.mark.parametrize("a, k, expected", [
    (2, 2, 4),
    (-2, 2, -4),
    (1, -4, -4),
    (3, 1, 3),
    (-1, -1, 1),
    (0, 1000, 0),     # zero exponent stays zero for any factor
    (4, 0, 0),        # zeroth power is always dimensionless
])
def test_scale_exponent(a, k, expected):
    assert scale_exponent(a, k) == expected


@pytest.mark.parametrize("a, k", [(3, 2), (4, 2), (-3, -2), (1, 5), (2, -3)])
def test_scale_exponent_out_of_domain(a, k):
    with pytest.raises(ExponentArithmeticError) as info:
        scale_exponent(a, k)
    assert info.value.operation == "scale"
    assert (info.value.left, info.value.right) == (a, k)


def test_scale_exponent_rejects_out_of_domain_base():
    with pytest.raises(ExponentArithmeticError):
        scale_exponent(5, 0)


def test_check_exponent():
    assert check_exponent(-4) == -4
    with pytest.raises(ExponentArithmeticError) as info:
        check_exponent(9)
    assert info.value.operation == "construct"
    assert info.value.right is None


def test_arithmetic_error_is_builtin_arithmetic_error():
    with pytest.raises(ArithmeticError):
        add_exponents(4, 4)
