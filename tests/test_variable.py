import pytest

from flecsolve.variable import (
    ANONYMOUS,
    AnonVar,
    MultiVariable,
    Variable,
    multivariable,
    variable,
)


def test_anonymous_is_max_size():
    anon = variable(AnonVar.ANONYMOUS)
    assert anon == ANONYMOUS
    assert anon.value == 2**64 - 1
    assert ANONYMOUS.value is AnonVar.ANONYMOUS


def test_variable_equality_by_value():
    assert variable(1) == variable(1)
    assert variable(1) != variable(2)
    assert variable("p").value == "p"


def test_variable_name_not_compared():
    assert Variable(3, name="pressure") == Variable(3)
    assert hash(Variable(3, name="pressure")) == hash(Variable(3))


def test_multivariable_iteration_and_length():
    mv = multivariable("a", "b", "c")
    assert list(mv) == ["a", "b", "c"]
    assert len(mv) == 3


def test_multivariable_accepts_variables():
    mv = multivariable(variable("a"), "b")
    assert mv == MultiVariable(("a", "b"))
    assert mv.variables == (Variable("a"), Variable("b"))


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (("a", "b"), ("a", "b"), True),
        (("a", "b"), ("b", "a"), False),
        (("a",), ("a", "b"), False),
    ],
)
def test_multivariable_equality(left, right, expected):
    assert (multivariable(*left) == multivariable(*right)) is expected


def test_empty_multivariable():
    assert len(multivariable()) == 0
    assert list(multivariable()) == []