"""Tests for the Eq, Show, Semigroup and Monoid instances."""

from fpkit.types.eq import (
    contramap,
    eq_boolean,
    eq_number,
    eq_strict,
    eq_string,
    from_equals,
)
from fpkit.types.semigroup import (
    concat_all,
    get_list_monoid,
    get_tuple_monoid,
    monoid_all,
    monoid_any,
    monoid_product,
    monoid_string,
    monoid_sum,
    semigroup_first,
    semigroup_last,
)
from fpkit.types.separated import Separated, separated
from fpkit.types.show import show_boolean, show_number, show_string


class TestEq:
    def test_primitive_instances(self):
        assert eq_number.equals(1, 1.0)
        assert not eq_number.equals(1, 2)
        assert eq_string.equals("a", "a")
        assert eq_boolean.equals(True, True)

    def test_nan_equals_itself(self):
        assert eq_number.equals(float("nan"), float("nan"))

    def test_strict_compares_types(self):
        assert not eq_strict.equals(1, 1.0)
        assert eq_strict.equals(1, 1)

    def test_contramap(self):
        by_length = contramap(eq_number, len)
        assert by_length.equals("ab", "cd")
        assert not by_length.equals("ab", "c")

    def test_from_equals_short_circuits_identity(self):
        calls = []
        eq = from_equals(lambda x, y: calls.append((x, y)) or False)
        value = object()
        assert eq.equals(value, value)
        assert calls == []


class TestShow:
    def test_show_string(self):
        assert show_string.show("a") == '"a"'
        assert show_string.show('say "hi"') == '"say \\"hi\\""'

    def test_show_number(self):
        assert show_number.show(1) == "1"
        assert show_number.show(1.0) == "1"
        assert show_number.show(1.5) == "1.5"

    def test_show_number_non_finite(self):
        assert show_number.show(float("nan")) == "NaN"
        assert show_number.show(float("inf")) == "Infinity"
        assert show_number.show(float("-inf")) == "-Infinity"

    def test_show_boolean(self):
        assert show_boolean.show(True) == "true"
        assert show_boolean.show(False) == "false"


class TestMonoids:
    def test_numeric(self):
        assert monoid_sum.concat(1, 2) == 3
        assert monoid_product.concat(2, 3) == 6
        assert concat_all(monoid_sum)([1, 2, 3]) == 6
        assert concat_all(monoid_product)([]) == 1

    def test_string_is_ordered(self):
        assert monoid_string.concat("a", "b") == "ab"
        assert concat_all(monoid_string)(["x", "y", "z"]) == "xyz"

    def test_boolean(self):
        assert concat_all(monoid_all)([True, True]) is True
        assert concat_all(monoid_all)([True, False]) is False
        assert concat_all(monoid_any)([False, True]) is True
        assert monoid_any.empty is False

    def test_first_and_last(self):
        assert semigroup_first.concat(1, 2) == 1
        assert semigroup_last.concat(1, 2) == 2

    def test_list_monoid_does_not_mutate(self):
        M = get_list_monoid()
        xs, ys = [1], [2]
        assert M.concat(xs, ys) == [1, 2]
        assert xs == [1]
        assert ys == [2]
        assert M.empty == []

    def test_tuple_monoid(self):
        M = get_tuple_monoid()
        assert M.concat((1,), (2,)) == (1, 2)
        assert concat_all(M)([]) == ()


def test_separated():
    pair = separated("l", "r")
    assert pair == Separated(left="l", right="r")
    assert pair.left == "l"
    assert pair.right == "r"
