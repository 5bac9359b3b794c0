"""
Functional Programming Core Components

This module provides the Either combinator core together with the
containers it works with (Option, Task), function composition helpers
and Either-based validation.
"""

from .either import (
    Either,
    Left,
    NotAnEitherError,
    Right,
    left,
    right,
    try_catch,
)
from .function import constant, flow, identity, pipe
from .option import Empty, Option, Some, empty, none, option_from_nullable, some
from .task import Task
from .validation import (
    FieldError,
    chain_validators,
    compose_validators,
    validate_fields,
    validate_model,
)

__all__ = [
    "Either",
    "Empty",
    "FieldError",
    "Left",
    "NotAnEitherError",
    "Option",
    "Right",
    "Some",
    "Task",
    "chain_validators",
    "compose_validators",
    "constant",
    "empty",
    "flow",
    "identity",
    "left",
    "none",
    "option_from_nullable",
    "pipe",
    "right",
    "some",
    "try_catch",
    "validate_fields",
    "validate_model",
]
