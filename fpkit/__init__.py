"""
fpkit: an Either combinator library.

    >>> from fpkit import either as E
    >>> from fpkit import pipe
    >>> pipe(E.right("abc"), E.map_(len))
    Right(3)
"""

import logging

from fpkit.core import either, option, task
from fpkit.core.either import Either, Left, Right, left, right
from fpkit.core.function import constant, flow, identity, pipe
from fpkit.core.option import Empty, Option, Some, none, some
from fpkit.core.task import Task
from fpkit.types.separated import Separated, separated

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Either",
    "Empty",
    "Left",
    "Option",
    "Right",
    "Separated",
    "Some",
    "Task",
    "constant",
    "either",
    "flow",
    "identity",
    "left",
    "none",
    "option",
    "pipe",
    "right",
    "separated",
    "some",
    "task",
]
