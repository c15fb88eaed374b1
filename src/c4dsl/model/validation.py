# topmark:header:start
#
#   project      : C4DSL
#   file         : validation.py
#   file_relpath : src/c4dsl/model/validation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Field validation for model records.

Every helper returns the validated value unchanged so calls can be used
inline, and raises `ElementValidationError` naming the record kind and field.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from c4dsl.model.errors import ElementValidationError

if TYPE_CHECKING:
    from collections.abc import Iterable

NAME_MAX_LENGTH: Final[int] = 255
DESCRIPTION_MAX_LENGTH: Final[int] = 1000
TECHNOLOGY_MAX_LENGTH: Final[int] = 255
LANGUAGE_MAX_LENGTH: Final[int] = 255
FILE_PATH_MAX_LENGTH: Final[int] = 512
RESPONSIBILITY_MAX_LENGTH: Final[int] = 500


def validate_non_empty(kind: str, field: str, value: str) -> str:
    """Reject empty or whitespace-only strings."""
    if not value.strip():
        raise ElementValidationError(kind, field, "cannot be empty")
    return value


def validate_max_length(kind: str, field: str, value: str | None, max_length: int) -> str | None:
    """Reject strings longer than ``max_length`` characters; None passes through."""
    if value is not None and len(value) > max_length:
        raise ElementValidationError(
            kind,
            field,
            f"exceeds maximum length of {max_length} characters (actual: {len(value)})",
        )
    return value


def validate_each_max_length(
    kind: str, field: str, values: Iterable[str], max_length: int
) -> tuple[str, ...]:
    """Apply `validate_max_length` to every item and return them as a tuple."""
    checked: list[str] = []
    for index, value in enumerate(values):
        validate_max_length(kind, f"{field}[{index}]", value, max_length)
        checked.append(value)
    return tuple(checked)


def validate_name(kind: str, value: str) -> str:
    """Validate a display name: non-empty, at most `NAME_MAX_LENGTH` characters."""
    validate_non_empty(kind, "name", value)
    validate_max_length(kind, "name", value, NAME_MAX_LENGTH)
    return value


def validate_description(kind: str, value: str) -> str:
    """Validate a description: non-empty, at most `DESCRIPTION_MAX_LENGTH` characters."""
    validate_non_empty(kind, "description", value)
    validate_max_length(kind, "description", value, DESCRIPTION_MAX_LENGTH)
    return value
