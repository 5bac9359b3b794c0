"""
Task monad for deferred asynchronous effects.

A Task wraps a zero-argument callable that returns an awaitable. Nothing
runs until the task is awaited, and every await runs the computation again:

    task = of(1).map(lambda n: n + 1)
    result = await task()   # or: await task.run()

Two applicative instances are provided. ``ApplicativePar`` runs both sides
of ``ap`` concurrently with ``asyncio.gather``; ``ApplicativeSeq`` awaits
the function side before the value side.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any, Generic, TypeVar

from fpkit.types.applicative import Applicative as ApplicativeInstance

A = TypeVar("A")
B = TypeVar("B")

logger = logging.getLogger(__name__)


class Task(Generic[A]):
    """Lazy asynchronous computation producing an A."""

    def __init__(self, computation: Callable[[], Awaitable[A]]) -> None:
        self._computation = computation

    def __call__(self) -> Awaitable[A]:
        return self._computation()

    async def run(self) -> A:
        """Execute the task and await its result."""
        return await self._computation()

    def map(self, func: Callable[[A], B]) -> "Task[B]":
        """Map a pure function over the task value."""

        async def mapped() -> B:
            return func(await self._computation())

        return Task(mapped)

    def flat_map(self, func: Callable[[A], "Task[B]"]) -> "Task[B]":
        """Async monadic bind."""

        async def bound() -> B:
            return await func(await self._computation())()

        return Task(bound)

    chain = flat_map

    def __repr__(self) -> str:
        return f"Task({self._computation!r})"


def of(value: A) -> Task[A]:
    """Lift a pure value into Task."""

    async def pure() -> A:
        return value

    return Task(pure)


def from_io(thunk: Callable[[], A]) -> Task[A]:
    """Lift a synchronous thunk; it runs when the task is awaited."""

    async def lifted() -> A:
        return thunk()

    return Task(lifted)


def delay(seconds: float) -> Callable[[Task[A]], Task[A]]:
    """Postpone a task by ``seconds`` before it starts."""

    def delayed(task: Task[A]) -> Task[A]:
        async def waited() -> A:
            await asyncio.sleep(seconds)
            return await task()

        return Task(waited)

    return delayed


def map_(func: Callable[[A], B]) -> Callable[[Task[A]], Task[B]]:
    return lambda task: task.map(func)


def flat_map(func: Callable[[A], Task[B]]) -> Callable[[Task[A]], Task[B]]:
    return lambda task: task.flat_map(func)


def _ap_par(fab: Task[Callable[[A], B]], fa: Task[A]) -> Task[B]:
    async def applied() -> B:
        func, value = await asyncio.gather(fab.run(), fa.run())
        return func(value)

    return Task(applied)


def _ap_seq(fab: Task[Callable[[A], B]], fa: Task[A]) -> Task[B]:
    async def applied() -> B:
        func = await fab()
        return func(await fa())

    return Task(applied)


def _map(fa: Task[A], func: Callable[[A], B]) -> Task[B]:
    return fa.map(func)


ApplicativePar = ApplicativeInstance(map=_map, of=of, ap=_ap_par)
ApplicativeSeq = ApplicativeInstance(map=_map, of=of, ap=_ap_seq)


def sequence_array(tasks: Iterable[Task[A]]) -> Task[list[A]]:
    """Run tasks concurrently and collect their results in input order."""
    pending = list(tasks)

    async def gathered() -> list[A]:
        logger.debug("Gathering %d tasks", len(pending))
        return list(await asyncio.gather(*(task.run() for task in pending)))

    return Task(gathered)


def sequence_array_seq(tasks: Iterable[Task[Any]]) -> Task[list[Any]]:
    """Run tasks one after the other and collect their results."""
    pending = list(tasks)

    async def sequenced() -> list[Any]:
        results = []
        for task in pending:
            results.append(await task())
        return results

    return Task(sequenced)


__all__ = [
    "ApplicativePar",
    "ApplicativeSeq",
    "Task",
    "delay",
    "flat_map",
    "from_io",
    "map_",
    "of",
    "sequence_array",
    "sequence_array_seq",
]
