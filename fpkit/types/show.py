"""Show instances: render values as source-like strings."""

import json
import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

A = TypeVar("A")


@dataclass(frozen=True)
class Show(Generic[A]):
    """Display instance for values of type A."""

    show: Callable[[A], str]


def _show_number(value: float) -> str:
    # JavaScript spellings for the non-finite values
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    if isinstance(value, float) and math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)


show_string: Show[str] = Show(lambda s: json.dumps(s, ensure_ascii=False))
show_number: Show[float] = Show(_show_number)
show_boolean: Show[bool] = Show(lambda b: "true" if b else "false")


__all__ = ["Show", "show_boolean", "show_number", "show_string"]
