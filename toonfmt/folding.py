"""Key folding and path expansion modes."""

from __future__ import annotations

from enum import Enum


class KeyFoldingMode(Enum):
    """How single-key object chains are folded when encoding (default OFF)."""

    OFF = "off"
    SAFE = "safe"


class PathExpansionMode(Enum):
    """How dotted keys are expanded when decoding (default OFF)."""

    OFF = "off"
    SAFE = "safe"


def is_identifier_segment(s: str) -> bool:
    """Whether ``s`` is a letter/underscore followed by letters, digits or underscores."""
    if not s:
        return False
    first, rest = s[0], s[1:]
    if not (first.isalpha() or first == "_"):
        return False
    return all(c.isalnum() or c == "_" for c in rest)