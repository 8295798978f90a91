"""Structural checks on values before encoding."""

from __future__ import annotations

from typing import Any

from toonfmt.errors import InvalidInputError, InvalidStructureError


def validate_depth(depth: int, max_depth: int) -> None:
    """Raise InvalidStructureError if ``depth`` exceeds ``max_depth``."""
    if depth > max_depth:
        raise InvalidStructureError(f"Maximum nesting depth of {max_depth} exceeded")


def validate_field_name(name: str) -> None:
    """Raise InvalidInputError if ``name`` is empty."""
    if not name:
        raise InvalidInputError("Field name cannot be empty")


def validate_value(value: Any) -> None:
    """Check every object key in ``value``, recursively, is non-empty."""
    if isinstance(value, dict):
        for key, item in value.items():
            validate_field_name(key)
            validate_value(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            validate_value(item)