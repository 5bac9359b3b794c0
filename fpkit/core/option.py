"""
Option monad for handling absent values in functional programming.

This module provides an Option type for representing values that may or may not exist,
with Some representing a value and Empty representing absence.

Monad Laws:
1. Left Identity: some(a).flat_map(f) == f(a)
2. Right Identity: m.flat_map(some) == m
3. Associativity: m.flat_map(f).flat_map(g) == m.flat_map(lambda x: f(x).flat_map(g))
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, cast

from fpkit.types.applicative import Applicative as ApplicativeInstance

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T], ABC):
    """Abstract base class for Option monad."""

    @abstractmethod
    def is_some(self) -> bool:
        """Check if this is a Some (has value)."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Check if this is Empty (no value)."""

    @abstractmethod
    def map(self, func: Callable[[T], U]) -> "Option[U]":
        """Map function over Some value, preserving Empty."""

    @abstractmethod
    def flat_map(self, func: Callable[[T], "Option[U]"]) -> "Option[U]":
        """Flat map function over Some value."""

    @abstractmethod
    def fold(self, on_empty: Callable[[], U], on_some: Callable[[T], U]) -> U:
        """Fold Option by providing a thunk for Empty and a function for Some."""

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        """Keep the value only if it satisfies the predicate."""
        if self.is_some() and predicate(cast("Some[T]", self).value):
            return self
        return Empty()

    def get_or_else(self, default: T) -> T:
        """Get Some value or return default."""
        if self.is_some():
            return cast("Some[T]", self).value
        return default

    def or_else(self, other: Callable[[], "Option[T]"]) -> "Option[T]":
        """Return this if Some, otherwise evaluate other."""
        return self if self.is_some() else other()

    def to_list(self) -> list[T]:
        """Convert Option to list (empty list for Empty, single-item list for Some)."""
        return [cast("Some[T]", self).value] if self.is_some() else []


@dataclass(frozen=True, repr=False)
class Some(Option[T]):
    """Some variant of Option representing a value."""

    value: T

    def is_some(self) -> bool:
        return True

    def is_empty(self) -> bool:
        return False

    def map(self, func: Callable[[T], U]) -> Option[U]:
        return Some(func(self.value))

    def flat_map(self, func: Callable[[T], Option[U]]) -> Option[U]:
        return func(self.value)

    def fold(self, on_empty: Callable[[], U], on_some: Callable[[T], U]) -> U:
        return on_some(self.value)

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True, repr=False)
class Empty(Option[T]):
    """Empty variant of Option representing absence of value."""

    def is_some(self) -> bool:
        return False

    def is_empty(self) -> bool:
        return True

    def map(self, func: Callable[[T], U]) -> Option[U]:
        return cast("Option[U]", self)

    def flat_map(self, func: Callable[[T], Option[U]]) -> Option[U]:
        return cast("Option[U]", self)

    def fold(self, on_empty: Callable[[], U], on_some: Callable[[T], U]) -> U:
        return on_empty()

    def __repr__(self) -> str:
        return "Empty()"


none: Option[Any] = Empty()


# Utility functions for creating Option instances
def some(value: T) -> Option[T]:
    """Create a Some Option."""
    return Some(value)


def empty() -> Option[T]:
    """Create an Empty Option."""
    return Empty()


def from_nullable(value: T | None) -> Option[T]:
    """Create Option from potentially null value."""
    return Some(value) if value is not None else Empty()


option_from_nullable = from_nullable


def is_some(option: Option[T]) -> bool:
    return option.is_some()


def is_none(option: Option[T]) -> bool:
    return option.is_empty()


# Pipeable variants
def map_(func: Callable[[T], U]) -> Callable[[Option[T]], Option[U]]:
    return lambda option: option.map(func)


def flat_map(func: Callable[[T], Option[U]]) -> Callable[[Option[T]], Option[U]]:
    return lambda option: option.flat_map(func)


def fold(
    on_empty: Callable[[], U], on_some: Callable[[T], U]
) -> Callable[[Option[T]], U]:
    return lambda option: option.fold(on_empty, on_some)


def get_or_else(on_empty: Callable[[], T]) -> Callable[[Option[T]], T]:
    return lambda option: option.fold(on_empty, lambda value: value)


def to_list(option: Option[T]) -> list[T]:
    return option.to_list()


def sequence_option(options: Iterable[Option[T]]) -> Option[list[T]]:
    """Transform Options into an Option of list.

    Returns Empty if any option is Empty, otherwise Some with all values.
    """
    results = []
    for option in options:
        if option.is_empty():
            return Empty()
        results.append(cast("Some[T]", option).value)
    return Some(results)


def traverse_option(
    items: Iterable[T], func: Callable[[T], Option[U]]
) -> Option[list[U]]:
    """Apply function to each item and sequence results."""
    return sequence_option(func(item) for item in items)


def _ap(fab: Option[Callable[[T], U]], fa: Option[T]) -> Option[U]:
    return fab.flat_map(fa.map)


Applicative = ApplicativeInstance(
    map=lambda fa, func: fa.map(func),
    of=some,
    ap=_ap,
)


__all__ = [
    "Applicative",
    "Empty",
    "Option",
    "Some",
    "empty",
    "flat_map",
    "fold",
    "from_nullable",
    "get_or_else",
    "is_none",
    "is_some",
    "map_",
    "none",
    "option_from_nullable",
    "sequence_option",
    "some",
    "to_list",
    "traverse_option",
]
