"""Helpers for JSON-like Python values (None, bool, int, float, str, list, dict)."""

from __future__ import annotations

import math
from typing import Any


def type_name(value: Any) -> str:
    """JSON type name of ``value``."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    raise TypeError(f"not a JSON value: {type(value).__name__}")


def is_integer(value: int | float) -> bool:
    """Whether a number has no fractional part."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"not a number: {type(value).__name__}")
    if isinstance(value, int):
        return True
    return value.is_integer()


def _format_number(n: int | float) -> str:
    if isinstance(n, int):
        return str(n)
    if not math.isfinite(n):
        return "0"
    text = repr(n)
    if "e" in text:
        mantissa, exponent = text.split("e")
        sign = "-" if exponent.startswith("-") else ""
        digits = exponent.lstrip("+-").lstrip("0") or "0"
        text = f"{mantissa}e{sign}{digits}"
    return text


def display(value: Any) -> str:
    """Render ``value`` as compact JSON-like text (strings are not escaped)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _format_number(value)
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(display(v) for v in value) + "]"
    if isinstance(value, dict):
        return "{" + ", ".join(f'"{k}": {display(v)}' for k, v in value.items()) + "}"
    raise TypeError(f"not a JSON value: {type(value).__name__}")