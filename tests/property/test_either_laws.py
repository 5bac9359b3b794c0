"""
Property-based tests for the Either laws.

Hypothesis generates arbitrary Left and Right values to check:
- Functor identity and composition
- Monad left identity, right identity and associativity
- Combinator invariants (swap, filter_or_else, traversal)
- Validation error accumulation
"""

import hypothesis.strategies as st
from hypothesis import given

from fpkit.core import either as E
from fpkit.core.function import identity, pipe
from fpkit.types.eq import eq_number, eq_string
from fpkit.types.semigroup import get_list_monoid, monoid_string, semigroup_sum

lefts = st.text(max_size=10).map(E.left)
rights = st.integers().map(E.right)
eithers = st.one_of(lefts, rights)

int_functions = st.sampled_from(
    [lambda x: x + 1, lambda x: x * 2, lambda x: -x, abs, lambda x: x % 7]
)
kleisli = st.sampled_from(
    [
        lambda x: E.right(x + 1),
        lambda x: E.left("negative") if x < 0 else E.right(x),
        lambda x: E.left(str(x)),
    ]
)


class TestFunctorLaws:
    @given(eithers)
    def test_identity(self, fa):
        """Test Either functor identity law: fmap id ≡ id"""
        assert pipe(fa, E.map_(identity)) == fa

    @given(eithers, int_functions, int_functions)
    def test_composition(self, fa, f, g):
        """Test Either functor composition law: fmap (g . f) ≡ fmap g . fmap f"""
        assert pipe(fa, E.map_(lambda x: g(f(x)))) == pipe(fa, E.map_(f), E.map_(g))


class TestMonadLaws:
    @given(st.integers(), kleisli)
    def test_left_identity(self, value, f):
        """Test Either monad left identity law: return a >>= f ≡ f a"""
        assert pipe(E.of(value), E.chain(f)) == f(value)

    @given(eithers)
    def test_right_identity(self, m):
        """Test Either monad right identity law: m >>= return ≡ m"""
        assert pipe(m, E.chain(E.of)) == m

    @given(eithers, kleisli, kleisli)
    def test_associativity(self, m, f, g):
        """Test Either monad associativity law: (m >>= f) >>= g ≡ m >>= (\\x -> f x >>= g)"""
        assert pipe(m, E.chain(f), E.chain(g)) == pipe(
            m, E.chain(lambda x: pipe(f(x), E.chain(g)))
        )

    @given(eithers)
    def test_methods_agree_with_pipeables(self, m):
        f = lambda x: E.right(x * 3)
        assert m.flat_map(f) == pipe(m, E.chain(f))
        assert m.map(str) == pipe(m, E.map_(str))


class TestCombinatorInvariants:
    @given(eithers)
    def test_swap_is_involution(self, fa):
        assert E.swap(E.swap(fa)) == fa

    @given(eithers)
    def test_filter_or_else_is_idempotent(self, fa):
        once = E.filter_or_else(lambda n: n > 0, lambda n: f"{n} rejected")
        assert once(once(fa)) == once(fa)

    @given(eithers)
    def test_exists_matches_fold(self, fa):
        predicate = lambda n: n % 2 == 0
        assert E.exists(predicate)(fa) == E.fold(lambda _: False, predicate)(fa)

    @given(eithers)
    def test_get_eq_is_reflexive_and_separates_variants(self, fa):
        eq = E.get_eq(eq_string, eq_number)
        assert eq.equals(fa, fa)
        assert eq.equals(fa, E.swap(fa)) is False

    @given(st.lists(eithers, max_size=8))
    def test_sequence_returns_first_left_or_all_rights(self, items):
        result = E.sequence_readonly_array(items)
        first_left = next((item for item in items if E.is_left(item)), None)
        if first_left is None:
            assert result == E.right(tuple(item.value for item in items))
        else:
            assert result is first_left

    @given(eithers, eithers)
    def test_get_semigroup_prefers_rights(self, x, y):
        result = E.get_semigroup(semigroup_sum).concat(x, y)
        if E.is_right(x) and E.is_right(y):
            assert result == E.right(x.value + y.value)
        elif E.is_right(x) or E.is_right(y):
            assert E.is_right(result)
        else:
            assert result == x


class TestValidationAccumulation:
    @given(st.lists(eithers, min_size=1, max_size=6))
    def test_collects_every_left_in_order(self, items):
        A = E.get_applicative_validation(get_list_monoid())
        acc = E.right(())
        for item in items:
            lifted = E.map_left(lambda e: [e])(item)
            acc = A.ap(A.map(acc, lambda xs: lambda x: (*xs, x)), lifted)

        errors = [item.value for item in items if E.is_left(item)]
        if errors:
            assert acc == E.left(errors)
        else:
            assert acc == E.right(tuple(item.value for item in items))

    @given(st.text(max_size=5), st.text(max_size=5))
    def test_function_side_error_comes_first(self, a, b):
        A = E.get_applicative_validation(monoid_string)
        assert A.ap(E.left(a), E.left(b)) == E.left(a + b)
