"""
Semigroup and Monoid instances.

Monoid Laws:
1. Associativity: concat(concat(x, y), z) == concat(x, concat(y, z))
2. Right Identity: concat(x, empty) == x
3. Left Identity: concat(empty, x) == x
"""

import operator
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import reduce
from typing import Any, Generic, TypeVar

A = TypeVar("A")


@dataclass(frozen=True)
class Semigroup(Generic[A]):
    """Associative binary operation over A."""

    concat: Callable[[A, A], A]


@dataclass(frozen=True)
class Monoid(Semigroup[A]):
    """Semigroup with an identity element."""

    empty: A


semigroup_sum: Semigroup[float] = Semigroup(operator.add)
semigroup_product: Semigroup[float] = Semigroup(operator.mul)
semigroup_first: Semigroup[Any] = Semigroup(lambda x, _y: x)
semigroup_last: Semigroup[Any] = Semigroup(lambda _x, y: y)

monoid_string: Monoid[str] = Monoid(operator.add, "")
monoid_sum: Monoid[float] = Monoid(operator.add, 0)
monoid_product: Monoid[float] = Monoid(operator.mul, 1)
monoid_all: Monoid[bool] = Monoid(lambda x, y: x and y, True)
monoid_any: Monoid[bool] = Monoid(lambda x, y: x or y, False)


def get_list_monoid() -> Monoid[list[Any]]:
    """Monoid of list concatenation; both operands are left untouched."""
    return Monoid(lambda xs, ys: [*xs, *ys], [])


def get_tuple_monoid() -> Monoid[tuple[Any, ...]]:
    """Monoid of tuple concatenation."""
    return Monoid(operator.add, ())


def concat_all(monoid: Monoid[A]) -> Callable[[Iterable[A]], A]:
    """Fold an iterable with the monoid, starting from its empty value."""

    def fold(items: Iterable[A]) -> A:
        return reduce(monoid.concat, items, monoid.empty)

    return fold


__all__ = [
    "Monoid",
    "Semigroup",
    "concat_all",
    "get_list_monoid",
    "get_tuple_monoid",
    "monoid_all",
    "monoid_any",
    "monoid_product",
    "monoid_string",
    "monoid_sum",
    "semigroup_first",
    "semigroup_last",
    "semigroup_product",
    "semigroup_sum",
]
