"""Separated: the pair produced by partitioning operations."""

from dataclasses import dataclass
from typing import Generic, TypeVar

E = TypeVar("E")
A = TypeVar("A")


@dataclass(frozen=True)
class Separated(Generic[E, A]):
    """Two accumulations split by a predicate or a mapping."""

    left: E
    right: A


def separated(left: E, right: A) -> Separated[E, A]:
    """Create a Separated pair."""
    return Separated(left, right)


__all__ = ["Separated", "separated"]
