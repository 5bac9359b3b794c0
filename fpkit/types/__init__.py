"""Typeclass instance records passed explicitly to the Either combinators."""

from .applicative import Alt, Applicative, Functor, Monad
from .eq import Eq, eq_boolean, eq_number, eq_strict, eq_string
from .semigroup import (
    Monoid,
    Semigroup,
    concat_all,
    get_list_monoid,
    monoid_string,
    monoid_sum,
    semigroup_sum,
)
from .separated import Separated, separated
from .show import Show, show_boolean, show_number, show_string

__all__ = [
    "Alt",
    "Applicative",
    "Eq",
    "Functor",
    "Monad",
    "Monoid",
    "Semigroup",
    "Separated",
    "Show",
    "concat_all",
    "eq_boolean",
    "eq_number",
    "eq_strict",
    "eq_string",
    "get_list_monoid",
    "monoid_string",
    "monoid_sum",
    "semigroup_sum",
    "separated",
    "show_boolean",
    "show_number",
    "show_string",
]
