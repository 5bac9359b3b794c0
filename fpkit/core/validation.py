"""
Functional validation built on Either.

This module provides:
- Pydantic error records for failed validations
- Composable validators returning Either[list[FieldError], value]
- Error-accumulating composition through the validation applicative
- Pydantic model validation lifted into Either
"""

import re
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, Field, ValidationError

from fpkit.core.either import (
    Either,
    Left,
    Right,
    get_applicative_validation,
    traverse_readonly_array,
)
from fpkit.types.semigroup import get_list_monoid

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class FieldError(BaseModel):
    """Individual field validation error."""

    field: str
    message: str
    value: str | None = None
    validation_rule: str | None = None
    context: dict[str, Any] = Field(default_factory=dict)

    def __str__(self) -> str:
        context_str = f" (context: {self.context})" if self.context else ""
        return f"Field '{self.field}': {self.message}{context_str}"


Validator = Callable[[T], Either[list[FieldError], T]]

# Accumulates error lists: [*function_side_errors, *value_side_errors]
ValidationApplicative = get_applicative_validation(get_list_monoid())


def _fail(field: str, message: str, value: Any, rule: str, **context: Any) -> Either:
    return Left(
        [
            FieldError(
                field=field,
                message=message,
                value=None if value is None else str(value),
                validation_rule=rule,
                context=context,
            )
        ]
    )


# Validation primitives


def validate_positive(field: str = "value") -> Validator[float]:
    """Validator for strictly positive numbers."""

    def validator(value: float) -> Either[list[FieldError], float]:
        if value <= 0:
            return _fail(field, f"Must be positive, got {value}", value, "positive")
        return Right(value)

    return validator


def validate_range(
    field: str, min_val: float, max_val: float
) -> Validator[float]:
    """Higher-order function to create range validators."""

    def validator(value: float) -> Either[list[FieldError], float]:
        if not (min_val <= value <= max_val):
            return _fail(
                field,
                f"Must be between {min_val} and {max_val}, got {value}",
                value,
                "range",
                min=min_val,
                max=max_val,
            )
        return Right(value)

    return validator


def validate_non_empty(field: str = "value") -> Validator[Any]:
    """Reject empty strings and empty collections."""

    def validator(value: Any) -> Either[list[FieldError], Any]:
        if value is None or len(value) == 0:
            return _fail(field, "Must not be empty", value, "non_empty")
        return Right(value)

    return validator


def validate_pattern(field: str, pattern: str) -> Validator[str]:
    """Require a full regex match."""
    compiled = re.compile(pattern)

    def validator(value: str) -> Either[list[FieldError], str]:
        if not compiled.fullmatch(value):
            return _fail(
                field,
                f"Must match pattern {pattern!r}",
                value,
                "pattern",
                pattern=pattern,
            )
        return Right(value)

    return validator


# Combinators


def compose_validators(*validators: Validator[T]) -> Validator[T]:
    """Run every validator on the same value and collect all errors."""

    def composed(value: T) -> Either[list[FieldError], T]:
        result: Either[list[FieldError], T] = Right(value)
        for validator in validators:
            keep_first = ValidationApplicative.map(result, lambda v: lambda _: v)
            result = ValidationApplicative.ap(keep_first, validator(value))
        return result

    return composed


def chain_validators(*validators: Validator[Any]) -> Validator[Any]:
    """Fail fast: each validator receives the previous one's output."""

    def chained(value: Any) -> Either[list[FieldError], Any]:
        result: Either[list[FieldError], Any] = Right(value)
        for validator in validators:
            result = result.flat_map(validator)
        return result

    return chained


def validate_fields(
    **field_validators: Validator[Any],
) -> Callable[[Mapping[str, Any]], Either[list[FieldError], dict[str, Any]]]:
    """Validate a mapping field by field, accumulating every field's errors.

    Missing fields are reported as errors; extra fields are passed through.
    """

    def validator(data: Mapping[str, Any]) -> Either[list[FieldError], dict[str, Any]]:
        result: Either[list[FieldError], dict[str, Any]] = Right(dict(data))
        for name, field_validator in field_validators.items():
            if name not in data:
                checked = _fail(name, "Field is required", None, "required")
            else:
                checked = field_validator(data[name])
            merge = ValidationApplicative.map(
                result, lambda acc, name=name: lambda v: {**acc, name: v}
            )
            result = ValidationApplicative.ap(merge, checked)
        return result

    return validator


def validate_each(validator: Validator[T]) -> Callable[[list[T]], Either]:
    """Validate a list of items, stopping at the first invalid one."""
    return traverse_readonly_array(validator)


def _field_errors(error: ValidationError) -> list[FieldError]:
    return [
        FieldError(
            field=".".join(str(part) for part in detail["loc"]) or "__root__",
            message=detail["msg"],
            value=None if detail.get("input") is None else str(detail.get("input")),
            validation_rule=detail["type"],
        )
        for detail in error.errors()
    ]


def validate_model(
    model_cls: type[M],
) -> Callable[[Mapping[str, Any]], Either[list[FieldError], M]]:
    """Lift pydantic model validation into Either."""

    def validator(data: Mapping[str, Any]) -> Either[list[FieldError], M]:
        try:
            return Right(model_cls.model_validate(data))
        except ValidationError as e:
            return Left(_field_errors(e))

    return validator


__all__ = [
    "FieldError",
    "ValidationApplicative",
    "Validator",
    "chain_validators",
    "compose_validators",
    "validate_each",
    "validate_fields",
    "validate_model",
    "validate_non_empty",
    "validate_pattern",
    "validate_positive",
    "validate_range",
]
