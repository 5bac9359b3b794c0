"""
Function composition helpers.

Every pipeable combinator in fpkit is data-last and curried, so a chain of
them reads top to bottom with ``pipe``:

    pipe(right("abc"), map_(len), get_or_else(lambda _: 0))
"""

from collections.abc import Callable
from functools import reduce
from typing import Any, TypeVar

T = TypeVar("T")
U = TypeVar("U")


def identity(value: T) -> T:
    """Return the argument unchanged."""
    return value


def constant(value: T) -> Callable[..., T]:
    """Build a function that ignores its arguments and returns ``value``."""

    def const(*_args: Any, **_kwargs: Any) -> T:
        return value

    return const


def pipe(value: Any, *functions: Callable[[Any], Any]) -> Any:
    """Thread ``value`` through ``functions`` from left to right."""
    return reduce(lambda acc, func: func(acc), functions, value)


def flow(*functions: Callable[..., Any]) -> Callable[..., Any]:
    """Compose functions left to right; the first may take any arguments."""
    if not functions:
        return identity

    first, rest = functions[0], functions[1:]

    def flowed(*args: Any, **kwargs: Any) -> Any:
        return pipe(first(*args, **kwargs), *rest)

    return flowed


__all__ = ["constant", "flow", "identity", "pipe"]
