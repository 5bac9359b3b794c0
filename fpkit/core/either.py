"""
Either monad for handling success/error cases in functional programming.

This module provides an Either type for representing computations that may fail,
with Left representing failure and Right representing success, plus the
combinator library that works on it.

Module-level combinators are pipeable (data-last and curried):

    pipe(right("abc"), map_(len), chain(from_predicate(lambda n: n > 2)))

Instance builders (``get_eq``, ``get_semigroup``, ``get_filterable``, ...)
take the instances they depend on explicitly and return records of
data-first functions.

Monad Laws:
1. Left Identity: right(a).flat_map(f) == f(a)
2. Right Identity: m.flat_map(right) == m
3. Associativity: m.flat_map(f).flat_map(g) == m.flat_map(lambda x: f(x).flat_map(g))
"""

import copy
import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, cast

from fpkit.core.option import Option
from fpkit.types.applicative import Alt as AltInstance
from fpkit.types.applicative import Applicative as ApplicativeInstance
from fpkit.types.applicative import Functor as FunctorInstance
from fpkit.types.applicative import Monad as MonadInstance
from fpkit.types.eq import Eq
from fpkit.types.semigroup import Monoid, Semigroup
from fpkit.types.separated import Separated
from fpkit.types.show import Show

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
E2 = TypeVar("E2")
A = TypeVar("A")
B = TypeVar("B")

logger = logging.getLogger(__name__)


class NotAnEitherError(TypeError):
    """Raised when a combinator receives something other than Left or Right."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Expected Left or Right, got {type(value).__name__}: {value!r}"
        )
        self.value = value


class Either(Generic[E, T], ABC):
    """Abstract base class for Either monad."""

    value: Any

    @abstractmethod
    def is_left(self) -> bool:
        """Check if this is a Left (error) value."""

    @abstractmethod
    def is_right(self) -> bool:
        """Check if this is a Right (success) value."""

    @abstractmethod
    def map(self, func: Callable[[T], U]) -> "Either[E, U]":
        """Map function over Right value, preserving Left."""

    @abstractmethod
    def flat_map(self, func: Callable[[T], "Either[E, U]"]) -> "Either[E, U]":
        """Flat map function over Right value."""

    @abstractmethod
    def map_left(self, func: Callable[[E], U]) -> "Either[U, T]":
        """Map function over Left value, preserving Right."""

    @abstractmethod
    def fold(self, left_func: Callable[[E], U], right_func: Callable[[T], U]) -> U:
        """Fold Either by applying appropriate function."""

    def chain(self, func: Callable[[T], "Either[E, U]"]) -> "Either[E, U]":
        """Alias for flat_map."""
        return self.flat_map(func)

    def bimap(
        self, left_func: Callable[[E], E2], right_func: Callable[[T], U]
    ) -> "Either[E2, U]":
        """Map both sides at once."""
        return cast("Either[E2, U]", self.map_left(left_func).map(right_func))

    def get_or_else(self, default: T) -> T:
        """Get Right value or return default."""
        if self.is_right():
            return cast("Right[E, T]", self).value
        return default

    def or_else(self, func: Callable[[E], "Either[E2, T]"]) -> "Either[E2, T]":
        """Return this if Right, otherwise recover from the Left value."""
        return self.fold(func, lambda _: cast("Either[E2, T]", self))

    def alt(self, that: Callable[[], "Either[E, T]"]) -> "Either[E, T]":
        """Return this if Right, otherwise evaluate the alternative."""
        return self if self.is_right() else that()

    def swap(self) -> "Either[T, E]":
        """Exchange the variants."""
        return self.fold(Right, Left)

    def to_union(self) -> E | T:
        """Return whichever value is held."""
        return self.value


@dataclass(frozen=True, repr=False)
class Left(Either[E, T]):
    """Left side of Either representing an error/failure."""

    value: E

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False

    def map(self, func: Callable[[T], U]) -> Either[E, U]:
        return cast("Either[E, U]", self)

    def flat_map(self, func: Callable[[T], Either[E, U]]) -> Either[E, U]:
        return cast("Either[E, U]", self)

    def map_left(self, func: Callable[[E], U]) -> Either[U, T]:
        return Left(func(self.value))

    def fold(self, left_func: Callable[[E], U], right_func: Callable[[T], U]) -> U:
        return left_func(self.value)

    def __str__(self) -> str:
        return f"Left({self.value})"

    def __repr__(self) -> str:
        return f"Left({self.value!r})"


@dataclass(frozen=True, repr=False)
class Right(Either[E, T]):
    """Right side of Either representing success."""

    value: T

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True

    def map(self, func: Callable[[T], U]) -> Either[E, U]:
        return Right(func(self.value))

    def flat_map(self, func: Callable[[T], Either[E, U]]) -> Either[E, U]:
        return func(self.value)

    def map_left(self, func: Callable[[E], U]) -> Either[U, T]:
        return cast("Either[U, T]", self)

    def fold(self, left_func: Callable[[E], U], right_func: Callable[[T], U]) -> U:
        return right_func(self.value)

    def __str__(self) -> str:
        return f"Right({self.value})"

    def __repr__(self) -> str:
        return f"Right({self.value!r})"


def _is_left(ma: Any) -> bool:
    if isinstance(ma, Left):
        return True
    if isinstance(ma, Right):
        return False
    raise NotAnEitherError(ma)


# Constructors


def left(value: E) -> Either[E, Any]:
    """Create a Left Either."""
    return Left(value)


def right(value: T) -> Either[Any, T]:
    """Create a Right Either."""
    return Right(value)


of = right


def is_left(ma: Either[E, T]) -> bool:
    return _is_left(ma)


def is_right(ma: Either[E, T]) -> bool:
    return not _is_left(ma)


def from_predicate(
    predicate: Callable[[T], bool], on_false: Callable[[T], E] | None = None
) -> Callable[[T], Either[E, T]]:
    """Lift a predicate: Right when it holds, Left(on_false(a)) otherwise.

    Without ``on_false`` the rejected value itself becomes the Left.
    """

    def check(value: T) -> Either[E, T]:
        if predicate(value):
            return Right(value)
        return Left(on_false(value) if on_false is not None else cast(E, value))

    return check


def from_nullable(on_nullish: Callable[[], E]) -> Callable[[T | None], Either[E, T]]:
    """Left(on_nullish()) for None, Right(value) otherwise."""

    def convert(value: T | None) -> Either[E, T]:
        return Left(on_nullish()) if value is None else Right(value)

    return convert


def from_option(on_none: Callable[[], E]) -> Callable[[Option[T]], Either[E, T]]:
    """Convert an Option, using on_none() for the absent case."""

    def convert(option: Option[T]) -> Either[E, T]:
        return option.fold(lambda: Left(on_none()), Right)

    return convert


def _trace_caught_exceptions() -> bool:
    # Imported lazily: fpkit.config depends on this module
    from fpkit.config import current_settings

    return current_settings().fold(
        lambda _: False, lambda settings: settings.trace_caught_exceptions
    )


def try_catch(
    thunk: Callable[[], T], on_throw: Callable[[Exception], E] | None = None
) -> Either[E, T]:
    """Run a computation that may raise, capturing the exception as Left.

    The raw exception object becomes the Left unless ``on_throw`` maps it.
    """
    try:
        return Right(thunk())
    except Exception as e:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Captured %s in try_catch: %s",
                type(e).__name__,
                e,
                exc_info=_trace_caught_exceptions(),
            )
        return Left(on_throw(e) if on_throw is not None else cast(E, e))


def try_catch_k(
    func: Callable[..., T], on_throw: Callable[[Exception], E] | None = None
) -> Callable[..., Either[E, T]]:
    """Lift a raising function into one returning Either."""

    def lifted(*args: Any, **kwargs: Any) -> Either[E, T]:
        return try_catch(lambda: func(*args, **kwargs), on_throw)

    return lifted


def _reject_constant(token: str) -> Any:
    raise ValueError(f"{token} is not valid JSON")


def parse_json(text: str | bytes) -> Either[ValueError | RecursionError, Any]:
    """Parse JSON text; Left holds the decode error.

    NaN and Infinity are rejected, matching what stringify_json produces.
    """
    try:
        return Right(json.loads(text, parse_constant=_reject_constant))
    except (ValueError, RecursionError) as e:
        logger.debug("Failed to parse JSON: %s", e)
        return Left(e)


def stringify_json(value: Any) -> Either[ValueError | TypeError | RecursionError, str]:
    """Serialise to compact JSON; Left for circular or unserialisable data."""
    try:
        return Right(
            json.dumps(
                value, separators=(",", ":"), ensure_ascii=False, allow_nan=False
            )
        )
    except (ValueError, TypeError, RecursionError) as e:
        logger.debug("Failed to stringify JSON: %s", e)
        return Left(e)


# Functor / Bifunctor


def map_(func: Callable[[A], B]) -> Callable[[Either[E, A]], Either[E, B]]:
    def mapped(ma: Either[E, A]) -> Either[E, B]:
        if _is_left(ma):
            return cast("Either[E, B]", ma)
        return Right(func(ma.value))

    return mapped


def map_left(func: Callable[[E], E2]) -> Callable[[Either[E, A]], Either[E2, A]]:
    def mapped(ma: Either[E, A]) -> Either[E2, A]:
        if _is_left(ma):
            return Left(func(ma.value))
        return cast("Either[E2, A]", ma)

    return mapped


def bimap(
    left_func: Callable[[E], E2], right_func: Callable[[A], B]
) -> Callable[[Either[E, A]], Either[E2, B]]:
    def mapped(ma: Either[E, A]) -> Either[E2, B]:
        if _is_left(ma):
            return Left(left_func(ma.value))
        return Right(right_func(ma.value))

    return mapped


# Monad / Applicative


def chain(func: Callable[[A], Either[E, B]]) -> Callable[[Either[E, A]], Either[E, B]]:
    def chained(ma: Either[E, A]) -> Either[E, B]:
        if _is_left(ma):
            return cast("Either[E, B]", ma)
        return func(ma.value)

    return chained


chain_w = chain
flat_map = chain


def chain_first(
    func: Callable[[A], Either[E, B]],
) -> Callable[[Either[E, A]], Either[E, A]]:
    """Run func for its failure, keeping the original Right value."""

    def chained(ma: Either[E, A]) -> Either[E, A]:
        if _is_left(ma):
            return ma
        result = func(ma.value)
        return cast("Either[E, A]", result) if _is_left(result) else ma

    return chained


# Widening the error type only matters to a type checker
chain_first_w = chain_first


def ap(
    fa: Either[E, A],
) -> Callable[[Either[E, Callable[[A], B]]], Either[E, B]]:
    """Apply a Right-held function to fa; the function side's Left wins."""

    def applied(fab: Either[E, Callable[[A], B]]) -> Either[E, B]:
        if _is_left(fab):
            return cast("Either[E, B]", fab)
        if _is_left(fa):
            return cast("Either[E, B]", fa)
        return Right(fab.value(fa.value))

    return applied


def ap_first(fb: Either[E, B]) -> Callable[[Either[E, A]], Either[E, A]]:
    def applied(fa: Either[E, A]) -> Either[E, A]:
        if _is_left(fa):
            return fa
        return cast("Either[E, A]", fb) if _is_left(fb) else fa

    return applied


def ap_second(fb: Either[E, B]) -> Callable[[Either[E, A]], Either[E, B]]:
    def applied(fa: Either[E, A]) -> Either[E, B]:
        if _is_left(fa):
            return cast("Either[E, B]", fa)
        return fb

    return applied


def extend(func: Callable[[Either[E, A]], B]) -> Callable[[Either[E, A]], Either[E, B]]:
    def extended(wa: Either[E, A]) -> Either[E, B]:
        if _is_left(wa):
            return cast("Either[E, B]", wa)
        return Right(func(wa))

    return extended


def duplicate(wa: Either[E, A]) -> Either[E, Either[E, A]]:
    return extend(lambda w: w)(wa)


def flatten(mma: Either[E, Either[E, A]]) -> Either[E, A]:
    return chain(lambda ma: ma)(mma)


# Folding


def fold(
    on_left: Callable[[E], B], on_right: Callable[[A], B]
) -> Callable[[Either[E, A]], B]:
    def folded(ma: Either[E, A]) -> B:
        return on_left(ma.value) if _is_left(ma) else on_right(ma.value)

    return folded


match = fold


def get_or_else(on_left: Callable[[E], A]) -> Callable[[Either[E, A]], A]:
    return fold(on_left, lambda value: value)


def reduce(initial: B, func: Callable[[B, A], B]) -> Callable[[Either[E, A]], B]:
    def reduced(fa: Either[E, A]) -> B:
        return initial if _is_left(fa) else func(initial, fa.value)

    return reduced


def reduce_right(initial: B, func: Callable[[A, B], B]) -> Callable[[Either[E, A]], B]:
    def reduced(fa: Either[E, A]) -> B:
        return initial if _is_left(fa) else func(fa.value, initial)

    return reduced


def fold_map(
    monoid: Monoid[B],
) -> Callable[[Callable[[A], B]], Callable[[Either[E, A]], B]]:
    def with_func(func: Callable[[A], B]) -> Callable[[Either[E, A]], B]:
        def folded(fa: Either[E, A]) -> B:
            return monoid.empty if _is_left(fa) else func(fa.value)

        return folded

    return with_func


# Traversal


def traverse(
    applicative: ApplicativeInstance,
) -> Callable[[Callable[[A], Any]], Callable[[Either[E, A]], Any]]:
    """Traverse into any applicative: Left is lifted with ``of`` unchanged."""

    def with_func(func: Callable[[A], Any]) -> Callable[[Either[E, A]], Any]:
        def traversed(ta: Either[E, A]) -> Any:
            if _is_left(ta):
                return applicative.of(ta)
            return applicative.map(func(ta.value), Right)

        return traversed

    return with_func


def sequence(applicative: ApplicativeInstance) -> Callable[[Either[E, Any]], Any]:
    return traverse(applicative)(lambda fa: fa)


def traverse_readonly_array_with_index(
    func: Callable[[int, A], Either[E, B]],
) -> Callable[[Iterable[A]], Either[E, tuple[B, ...]]]:
    """Map each (index, item) to an Either and collect the Rights.

    Stops at the first Left, which is returned; later items are not visited.
    """

    def traversed(items: Iterable[A]) -> Either[E, tuple[B, ...]]:
        results = []
        for index, item in enumerate(items):
            result = func(index, item)
            if _is_left(result):
                return cast("Either[E, tuple[B, ...]]", result)
            results.append(result.value)
        return Right(tuple(results))

    return traversed


def traverse_readonly_array(
    func: Callable[[A], Either[E, B]],
) -> Callable[[Iterable[A]], Either[E, tuple[B, ...]]]:
    return traverse_readonly_array_with_index(lambda _, item: func(item))


def sequence_readonly_array(
    items: Iterable[Either[E, A]],
) -> Either[E, tuple[A, ...]]:
    return traverse_readonly_array(lambda ma: ma)(items)


traverse_array = traverse_readonly_array
traverse_array_with_index = traverse_readonly_array_with_index
sequence_array = sequence_readonly_array


# Alternative / utility


def alt(that: Callable[[], Either[E, A]]) -> Callable[[Either[E, A]], Either[E, A]]:
    """Keep a Right; otherwise evaluate and return the alternative."""

    def alternated(fa: Either[E, A]) -> Either[E, A]:
        return that() if _is_left(fa) else fa

    return alternated


def or_else(
    on_left: Callable[[E], Either[E2, A]],
) -> Callable[[Either[E, A]], Either[E2, A]]:
    """Recover from a Left by feeding its value to on_left."""

    def recovered(ma: Either[E, A]) -> Either[E2, A]:
        return on_left(ma.value) if _is_left(ma) else cast("Either[E2, A]", ma)

    return recovered


def swap(ma: Either[E, A]) -> Either[A, E]:
    return Right(ma.value) if _is_left(ma) else Left(ma.value)


def elem(eq: Eq[A]) -> Callable[[A], Callable[[Either[E, A]], bool]]:
    def with_value(value: A) -> Callable[[Either[E, A]], bool]:
        def contains(ma: Either[E, A]) -> bool:
            return not _is_left(ma) and eq.equals(ma.value, value)

        return contains

    return with_value


def exists(predicate: Callable[[A], bool]) -> Callable[[Either[E, A]], bool]:
    def check(ma: Either[E, A]) -> bool:
        return not _is_left(ma) and predicate(ma.value)

    return check


def filter_or_else(
    predicate: Callable[[A], bool], on_false: Callable[[A], E]
) -> Callable[[Either[E, A]], Either[E, A]]:
    """Turn a Right failing the predicate into Left(on_false(value))."""

    def filtered(ma: Either[E, A]) -> Either[E, A]:
        if _is_left(ma) or predicate(ma.value):
            return ma
        return Left(on_false(ma.value))

    return filtered


def to_union(fa: Either[E, A]) -> E | A:
    if not isinstance(fa, Either):
        raise NotAnEitherError(fa)
    return fa.value


def from_nullable_k(
    on_nullish: Callable[[], E],
) -> Callable[[Callable[..., B | None]], Callable[..., Either[E, B]]]:
    """Lift a None-returning function into one returning Either."""
    convert = from_nullable(on_nullish)

    def with_func(func: Callable[..., B | None]) -> Callable[..., Either[E, B]]:
        def lifted(*args: Any, **kwargs: Any) -> Either[E, B]:
            return convert(func(*args, **kwargs))

        return lifted

    return with_func


def chain_nullable_k(
    on_nullish: Callable[[], E],
) -> Callable[[Callable[[A], B | None]], Callable[[Either[E, A]], Either[E, B]]]:
    lift = from_nullable_k(on_nullish)

    def with_func(func: Callable[[A], B | None]) -> Callable[[Either[E, A]], Either[E, B]]:
        return chain(lift(func))

    return with_func


# Do notation

Do: Either[Any, dict[str, Any]] = Right({})


def bind_to(name: str) -> Callable[[Either[E, A]], Either[E, dict[str, A]]]:
    return map_(lambda value: {name: value})


def bind(
    name: str, func: Callable[[dict[str, Any]], Either[E, B]]
) -> Callable[[Either[E, dict[str, Any]]], Either[E, dict[str, Any]]]:
    """Run func on the scope built so far and store its Right under name."""
    return chain(lambda scope: map_(lambda b: {**scope, name: b})(func(scope)))


def ap_s(
    name: str, fb: Either[E, B]
) -> Callable[[Either[E, dict[str, Any]]], Either[E, dict[str, Any]]]:
    """Like bind, but fb does not depend on the scope."""

    def applied(fa: Either[E, dict[str, Any]]) -> Either[E, dict[str, Any]]:
        return ap(fb)(map_(lambda scope: lambda b: {**scope, name: b})(fa))

    return applied


def tupled(fa: Either[E, A]) -> Either[E, tuple[A]]:
    return map_(lambda value: (value,))(fa)


def ap_t(
    fb: Either[E, B],
) -> Callable[[Either[E, tuple[Any, ...]]], Either[E, tuple[Any, ...]]]:
    def applied(fas: Either[E, tuple[Any, ...]]) -> Either[E, tuple[Any, ...]]:
        return ap(fb)(map_(lambda values: lambda b: (*values, b))(fas))

    return applied


# Typeclass instances for Either itself


def _map(fa: Either[E, A], func: Callable[[A], B]) -> Either[E, B]:
    return map_(func)(fa)


def _ap(fab: Either[E, Callable[[A], B]], fa: Either[E, A]) -> Either[E, B]:
    return ap(fa)(fab)


def _chain(ma: Either[E, A], func: Callable[[A], Either[E, B]]) -> Either[E, B]:
    return chain(func)(ma)


def _alt(fa: Either[E, A], that: Callable[[], Either[E, A]]) -> Either[E, A]:
    return alt(that)(fa)


Functor = FunctorInstance(map=_map)
Applicative = ApplicativeInstance(map=_map, of=right, ap=_ap)
Monad = MonadInstance(map=_map, of=right, ap=_ap, chain=_chain)
Alt = AltInstance(map=_map, alt=_alt)


def get_eq(eq_e: Eq[E], eq_a: Eq[A]) -> Eq[Either[E, A]]:
    """Equal iff same variant and the held values are equal."""

    def equals(x: Either[E, A], y: Either[E, A]) -> bool:
        x_left, y_left = _is_left(x), _is_left(y)
        if x_left != y_left:
            return False
        if x_left:
            return eq_e.equals(x.value, y.value)
        return eq_a.equals(x.value, y.value)

    return Eq(equals)


def get_show(show_e: Show[E], show_a: Show[A]) -> Show[Either[E, A]]:
    def show(ma: Either[E, A]) -> str:
        if _is_left(ma):
            return f"left({show_e.show(ma.value)})"
        return f"right({show_a.show(ma.value)})"

    return Show(show)


def get_semigroup(semigroup: Semigroup[A]) -> Semigroup[Either[E, A]]:
    """Rights win over Lefts; two Rights are concatenated.

    Two Lefts keep the first one.
    """

    def concat(x: Either[E, A], y: Either[E, A]) -> Either[E, A]:
        if _is_left(y):
            return x
        if _is_left(x):
            return y
        return Right(semigroup.concat(x.value, y.value))

    return Semigroup(concat)


def get_apply_semigroup(semigroup: Semigroup[A]) -> Semigroup[Either[E, A]]:
    """Any Left short-circuits (the first one wins); two Rights are concatenated."""

    def concat(x: Either[E, A], y: Either[E, A]) -> Either[E, A]:
        if _is_left(x):
            return x
        if _is_left(y):
            return y
        return Right(semigroup.concat(x.value, y.value))

    return Semigroup(concat)


def get_apply_monoid(monoid: Monoid[A]) -> Monoid[Either[E, A]]:
    return Monoid(
        concat=get_apply_semigroup(monoid).concat, empty=Right(monoid.empty)
    )


@dataclass(frozen=True)
class Compactable:
    """compact(fa), separate(fa)"""

    compact: Callable[[Either[Any, Option[Any]]], Either[Any, Any]]
    separate: Callable[[Either[Any, Either[Any, Any]]], Separated[Any, Any]]


@dataclass(frozen=True)
class Filterable(Compactable):
    """Compactable plus map, filter, filter_map, partition, partition_map."""

    map: Callable[[Either[Any, Any], Callable[[Any], Any]], Either[Any, Any]]
    filter: Callable[[Either[Any, Any], Callable[[Any], bool]], Either[Any, Any]]
    filter_map: Callable[
        [Either[Any, Any], Callable[[Any], Option[Any]]], Either[Any, Any]
    ]
    partition: Callable[
        [Either[Any, Any], Callable[[Any], bool]], Separated[Any, Any]
    ]
    partition_map: Callable[
        [Either[Any, Any], Callable[[Any], Either[Any, Any]]], Separated[Any, Any]
    ]


@dataclass(frozen=True)
class Witherable(Filterable):
    """Filterable plus the effectful wither and wilt.

    ``wither(F)(fa, f)`` and ``wilt(F)(fa, f)`` return a value in the
    applicative F; with a Task applicative nothing runs until it is awaited.
    """

    wither: Callable[[ApplicativeInstance], Callable[[Either[Any, Any], Callable[[Any], Any]], Any]]
    wilt: Callable[[ApplicativeInstance], Callable[[Either[Any, Any], Callable[[Any], Any]], Any]]


def _empty_left(monoid: Monoid[E]) -> Either[E, Any]:
    # Fresh copy per result: a mutable empty (a list) is never shared
    return Left(copy.copy(monoid.empty))


def get_compactable(monoid: Monoid[E]) -> Compactable:
    """Absent values become Left(monoid.empty)."""

    def compact(fa: Either[E, Option[A]]) -> Either[E, A]:
        if _is_left(fa):
            return cast("Either[E, A]", fa)
        return fa.value.fold(lambda: _empty_left(monoid), Right)

    def separate(fa: Either[E, Either[A, B]]) -> Separated[Either[E, A], Either[E, B]]:
        if _is_left(fa):
            return Separated(fa, fa)
        inner = fa.value
        if _is_left(inner):
            return Separated(Right(inner.value), _empty_left(monoid))
        return Separated(_empty_left(monoid), Right(inner.value))

    return Compactable(compact=compact, separate=separate)


def get_filterable(monoid: Monoid[E]) -> Filterable:
    """Rights rejected by a predicate become Left(monoid.empty)."""
    compactable = get_compactable(monoid)

    def filter_(fa: Either[E, A], predicate: Callable[[A], bool]) -> Either[E, A]:
        if _is_left(fa):
            return fa
        return fa if predicate(fa.value) else _empty_left(monoid)

    def filter_map(fa: Either[E, A], func: Callable[[A], Option[B]]) -> Either[E, B]:
        if _is_left(fa):
            return cast("Either[E, B]", fa)
        return func(fa.value).fold(lambda: _empty_left(monoid), Right)

    def partition(
        fa: Either[E, A], predicate: Callable[[A], bool]
    ) -> Separated[Either[E, A], Either[E, A]]:
        if _is_left(fa):
            return Separated(fa, fa)
        if predicate(fa.value):
            return Separated(_empty_left(monoid), fa)
        return Separated(fa, _empty_left(monoid))

    def partition_map(
        fa: Either[E, A], func: Callable[[A], Either[B, T]]
    ) -> Separated[Either[E, B], Either[E, T]]:
        if _is_left(fa):
            return Separated(fa, fa)
        return compactable.separate(Right(func(fa.value)))

    return Filterable(
        compact=compactable.compact,
        separate=compactable.separate,
        map=_map,
        filter=filter_,
        filter_map=filter_map,
        partition=partition,
        partition_map=partition_map,
    )


def get_witherable(monoid: Monoid[E]) -> Witherable:
    """Filterable whose filtering functions return an applicative effect.

    The effectful function runs at most once, since an Either holds at most
    one value; the result is combined inside the effect with ``F.map``.
    """
    filterable = get_filterable(monoid)

    def wither(
        applicative: ApplicativeInstance,
    ) -> Callable[[Either[E, A], Callable[[A], Any]], Any]:
        def withered(fa: Either[E, A], func: Callable[[A], Any]) -> Any:
            if _is_left(fa):
                return applicative.of(fa)
            logger.debug("Dispatching wither effect for %r", fa)
            return applicative.map(
                func(fa.value), lambda option: filterable.compact(Right(option))
            )

        return withered

    def wilt(
        applicative: ApplicativeInstance,
    ) -> Callable[[Either[E, A], Callable[[A], Any]], Any]:
        def wilted(fa: Either[E, A], func: Callable[[A], Any]) -> Any:
            if _is_left(fa):
                return applicative.of(Separated(fa, fa))
            logger.debug("Dispatching wilt effect for %r", fa)
            return applicative.map(
                func(fa.value), lambda either: filterable.separate(Right(either))
            )

        return wilted

    return Witherable(
        compact=filterable.compact,
        separate=filterable.separate,
        map=filterable.map,
        filter=filterable.filter,
        filter_map=filterable.filter_map,
        partition=filterable.partition,
        partition_map=filterable.partition_map,
        wither=wither,
        wilt=wilt,
    )


def get_applicative_validation(monoid: Semigroup[E]) -> ApplicativeInstance:
    """Applicative that accumulates errors instead of short-circuiting.

    When both sides are Left the result is
    Left(monoid.concat(function_side_error, value_side_error)).
    """

    def ap_validation(
        fab: Either[E, Callable[[A], B]], fa: Either[E, A]
    ) -> Either[E, B]:
        if _is_left(fab):
            if _is_left(fa):
                return Left(monoid.concat(fab.value, fa.value))
            return cast("Either[E, B]", fab)
        if _is_left(fa):
            return cast("Either[E, B]", fa)
        return Right(fab.value(fa.value))

    return ApplicativeInstance(map=_map, of=right, ap=ap_validation)


def get_alt_validation(monoid: Semigroup[E]) -> AltInstance:
    """Alt that concatenates both errors when every alternative fails."""

    def alt_validation(
        fa: Either[E, A], that: Callable[[], Either[E, A]]
    ) -> Either[E, A]:
        if not _is_left(fa):
            return fa
        fb = that()
        if _is_left(fb):
            return Left(monoid.concat(fa.value, fb.value))
        return fb

    return AltInstance(map=_map, alt=alt_validation)


def get_validation_semigroup(
    semigroup_e: Semigroup[E], semigroup_a: Semigroup[A]
) -> Semigroup[Either[E, A]]:
    """Concatenate Rights, accumulate Lefts; a Left beats a Right."""

    def concat(x: Either[E, A], y: Either[E, A]) -> Either[E, A]:
        x_left, y_left = _is_left(x), _is_left(y)
        if x_left and y_left:
            return Left(semigroup_e.concat(x.value, y.value))
        if x_left:
            return x
        if y_left:
            return y
        return Right(semigroup_a.concat(x.value, y.value))

    return Semigroup(concat)


__all__ = [
    "Alt",
    "Applicative",
    "Compactable",
    "Do",
    "Either",
    "Filterable",
    "Functor",
    "Left",
    "Monad",
    "NotAnEitherError",
    "Right",
    "Witherable",
    "alt",
    "ap",
    "ap_first",
    "ap_s",
    "ap_second",
    "ap_t",
    "bimap",
    "bind",
    "bind_to",
    "chain",
    "chain_first",
    "chain_first_w",
    "chain_nullable_k",
    "chain_w",
    "duplicate",
    "elem",
    "exists",
    "extend",
    "filter_or_else",
    "flat_map",
    "flatten",
    "fold",
    "fold_map",
    "from_nullable",
    "from_nullable_k",
    "from_option",
    "from_predicate",
    "get_alt_validation",
    "get_applicative_validation",
    "get_apply_monoid",
    "get_apply_semigroup",
    "get_compactable",
    "get_eq",
    "get_filterable",
    "get_or_else",
    "get_semigroup",
    "get_show",
    "get_validation_semigroup",
    "get_witherable",
    "is_left",
    "is_right",
    "left",
    "map_",
    "map_left",
    "match",
    "of",
    "or_else",
    "parse_json",
    "reduce",
    "reduce_right",
    "right",
    "sequence",
    "sequence_array",
    "sequence_readonly_array",
    "stringify_json",
    "swap",
    "to_union",
    "traverse",
    "traverse_array",
    "traverse_array_with_index",
    "traverse_readonly_array",
    "traverse_readonly_array_with_index",
    "try_catch",
    "try_catch_k",
    "tupled",
]
