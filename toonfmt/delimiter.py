"""Delimiters that separate array elements."""

from __future__ import annotations

from enum import Enum


class Delimiter(Enum):
    """Character used to separate array elements; comma is the default."""

    COMMA = ","
    TAB = "\t"
    PIPE = "|"

    @property
    def char(self) -> str:
        """The delimiter character itself."""
        return self.value

    def as_metadata_str(self) -> str:
        """Text written into array headers: empty for comma, the character otherwise."""
        return "" if self is Delimiter.COMMA else self.value

    @classmethod
    def from_char(cls, c: str) -> Delimiter | None:
        """Return the delimiter for ``c``, or None if it is not a delimiter."""
        for member in cls:
            if member.value == c:
                return member
        return None

    def contains_in(self, s: str) -> bool:
        """Whether the delimiter character occurs in ``s``."""
        return self.value in s

    def __str__(self) -> str:
        return self.value