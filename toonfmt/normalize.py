"""Normalisation of JSON-like values before encoding."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any


class QuotingContext(Enum):
    """Where a string value appears, which decides when it needs quoting."""

    OBJECT_VALUE = "object_value"
    ARRAY_VALUE = "array_value"


def normalize(value: Any) -> Any:
    """Return ``value`` with NaN and infinities made None and -0.0 made 0."""
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value == 0.0 and math.copysign(1.0, value) < 0:
            return 0
        return value
    if isinstance(value, dict):
        return {k: normalize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [normalize(v) for v in value]
    return value