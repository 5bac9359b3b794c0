"""
Instance records for the effect-like typeclasses.

Each record is a bundle of data-first functions. Python cannot abstract
over type constructors, so the container type is ``Any`` here and the
concrete instances (``option.Applicative``, ``task.ApplicativePar``,
``either.Applicative``, ...) document their own shapes.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Functor:
    """map(fa, f)"""

    map: Callable[[Any, Callable[[Any], Any]], Any]


@dataclass(frozen=True)
class Applicative(Functor):
    """of(a), map(fa, f), ap(fab, fa)"""

    of: Callable[[Any], Any]
    ap: Callable[[Any, Any], Any]


@dataclass(frozen=True)
class Monad(Applicative):
    """Applicative plus chain(fa, f)."""

    chain: Callable[[Any, Callable[[Any], Any]], Any]


@dataclass(frozen=True)
class Alt(Functor):
    """alt(fa, that) where ``that`` is a zero-argument thunk."""

    alt: Callable[[Any, Callable[[], Any]], Any]


__all__ = ["Alt", "Applicative", "Functor", "Monad"]
