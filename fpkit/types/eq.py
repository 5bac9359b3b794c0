"""
Eq instances.

An ``Eq`` is an explicit equality strategy that is passed to the
combinators that need one (``get_eq``, ``elem``) instead of relying on
``__eq__`` alone.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

A = TypeVar("A")


@dataclass(frozen=True)
class Eq(Generic[A]):
    """Equality instance for values of type A."""

    equals: Callable[[A, A], bool]


def from_equals(equals: Callable[[A, A], bool]) -> Eq[A]:
    """Build an Eq whose comparison short-circuits on identity."""
    return Eq(lambda x, y: x is y or equals(x, y))


def _strict_equals(x: Any, y: Any) -> bool:
    return type(x) is type(y) and x == y


def _number_equals(x: float, y: float) -> bool:
    # NaN is equal to itself so that the Eq laws (reflexivity) hold
    if isinstance(x, float) and isinstance(y, float) and math.isnan(x) and math.isnan(y):
        return True
    return x == y


eq_strict: Eq[Any] = from_equals(_strict_equals)
eq_number: Eq[float] = from_equals(_number_equals)
eq_string: Eq[str] = from_equals(lambda x, y: x == y)
eq_boolean: Eq[bool] = from_equals(lambda x, y: x == y)


def contramap(eq: Eq[A], func: Callable[[Any], A]) -> Eq[Any]:
    """Compare values by first projecting them through ``func``."""
    return Eq(lambda x, y: eq.equals(func(x), func(y)))


__all__ = [
    "Eq",
    "contramap",
    "eq_boolean",
    "eq_number",
    "eq_strict",
    "eq_string",
    "from_equals",
]
