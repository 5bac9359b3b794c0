"""Tests for the Option monad."""

from hypothesis import given
from hypothesis import strategies as st

from fpkit.core import option as O
from fpkit.core.function import pipe
from fpkit.core.option import Empty, Some


class TestOption:
    """Test Option monad implementation."""

    def test_some_creation(self):
        """Test creating Some values."""
        opt = O.some(42)
        assert opt.is_some()
        assert not opt.is_empty()
        assert opt.value == 42

    def test_some_none_is_allowed(self):
        opt = Some(None)
        assert opt.is_some()
        assert opt.get_or_else("default") is None

    def test_empty_creation(self):
        """Test creating Empty values."""
        opt = O.empty()
        assert opt.is_empty()
        assert not opt.is_some()
        assert opt == O.none

    def test_from_nullable(self):
        assert O.from_nullable(0) == Some(0)
        assert O.from_nullable(None) == Empty()
        assert O.option_from_nullable("x") == Some("x")

    def test_map_and_flat_map(self):
        assert O.some(2).map(lambda n: n * 10) == Some(20)
        assert O.none.map(lambda n: n * 10) == O.none
        assert O.some(2).flat_map(lambda n: O.none) == O.none
        assert O.some(2).flat_map(lambda n: O.some(n + 1)) == Some(3)

    def test_fold(self):
        assert O.some(1).fold(lambda: "empty", str) == "1"
        assert O.none.fold(lambda: "empty", str) == "empty"

    def test_filter(self):
        assert O.some(3).filter(lambda n: n > 2) == Some(3)
        assert O.some(1).filter(lambda n: n > 2) == O.none
        assert O.none.filter(lambda n: True) == O.none

    def test_get_or_else_and_or_else(self):
        assert O.some(1).get_or_else(0) == 1
        assert O.none.get_or_else(0) == 0
        assert O.none.or_else(lambda: O.some(9)) == Some(9)
        assert O.some(1).or_else(lambda: O.some(9)) == Some(1)

    def test_to_list(self):
        assert O.some("a").to_list() == ["a"]
        assert O.none.to_list() == []
        assert O.to_list(O.some(1)) == [1]

    def test_repr(self):
        assert repr(O.some("a")) == "Some('a')"
        assert repr(O.none) == "Empty()"


class TestOptionPipeables:
    def test_pipeable_functions(self):
        assert pipe(O.some(2), O.map_(lambda n: n + 1)) == Some(3)
        assert pipe(O.some(2), O.flat_map(lambda n: O.none)) == O.none
        assert pipe(O.none, O.fold(lambda: 0, lambda n: n)) == 0
        assert pipe(O.none, O.get_or_else(lambda: "fallback")) == "fallback"

    def test_predicates(self):
        assert O.is_some(O.some(1))
        assert O.is_none(O.none)

    def test_sequence_option(self):
        assert O.sequence_option([O.some(1), O.some(2)]) == Some([1, 2])
        assert O.sequence_option([O.some(1), O.none]) == O.none
        assert O.sequence_option([]) == Some([])

    def test_traverse_option(self):
        half = lambda n: O.some(n // 2) if n % 2 == 0 else O.none
        assert O.traverse_option([2, 4], half) == Some([1, 2])
        assert O.traverse_option([2, 3], half) == O.none

    def test_applicative(self):
        A = O.Applicative
        assert A.of(1) == Some(1)
        assert A.ap(O.some(str), O.some(1)) == Some("1")
        assert A.ap(O.none, O.some(1)) == O.none
        assert A.ap(O.some(str), O.none) == O.none


class TestOptionLaws:
    @given(st.integers())
    def test_left_identity(self, value):
        """Test Option monad left identity law: return a >>= f ≡ f a"""
        f = lambda x: O.some(x * 2)
        assert O.some(value).flat_map(f) == f(value)

    @given(st.one_of(st.none(), st.integers()))
    def test_right_identity(self, value):
        """Test Option monad right identity law: m >>= return ≡ m"""
        m = O.from_nullable(value)
        assert m.flat_map(O.some) == m
