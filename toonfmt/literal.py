"""Checks for strings that would read back as keywords, numbers or structure."""

from __future__ import annotations

KEYWORDS = frozenset({"null", "true", "false"})
STRUCTURAL_CHARS = frozenset("[]{}:")

_NUMERIC_TAIL = frozenset("0123456789.eE+-")


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_keyword(s: str) -> bool:
    """Whether ``s`` is one of the literal keywords null, true or false."""
    return s in KEYWORDS


def is_structural_char(ch: str) -> bool:
    """Whether ``ch`` has structural meaning in TOON (brackets, braces, colon)."""
    return ch in STRUCTURAL_CHARS


def is_numeric_like(s: str) -> bool:
    """Whether ``s`` looks like a number: optional minus, a digit, no leading zero."""
    body = s[1:] if s.startswith("-") else s
    if not body or not _is_ascii_digit(body[0]):
        return False
    if body[0] == "0" and len(body) > 1 and _is_ascii_digit(body[1]):
        return False
    return all(c in _NUMERIC_TAIL for c in body)


def is_literal_like(s: str) -> bool:
    """Whether ``s`` would be read as a keyword or a number and so needs quoting."""
    return is_keyword(s) or is_numeric_like(s)