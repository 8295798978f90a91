"""Options that control TOON encoding and decoding."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from toonfmt.delimiter import Delimiter
from toonfmt.folding import KeyFoldingMode, PathExpansionMode

DEFAULT_INDENT = 2


@dataclass(frozen=True)
class Indent:
    """Indentation made of a fixed number of spaces per nesting level."""

    spaces: int = DEFAULT_INDENT

    def __post_init__(self) -> None:
        if self.spaces < 0:
            raise ValueError("indent must be a non-negative number of spaces")

    def string(self, depth: int) -> str:
        """Whitespace that indents a line at nesting ``depth``."""
        if depth <= 0 or self.spaces <= 0:
            return ""
        return " " * (self.spaces * depth)


@dataclass(frozen=True)
class EncodeOptions:
    """Settings for turning JSON-like values into TOON text.

    ``flatten_depth`` caps how many segments key folding joins; by default
    whole eligible chains are folded.
    """

    delimiter: Delimiter = Delimiter.COMMA
    indent: Indent = field(default_factory=Indent)
    key_folding: KeyFoldingMode = KeyFoldingMode.OFF
    flatten_depth: int = sys.maxsize

    def __post_init__(self) -> None:
        if self.flatten_depth < 0:
            raise ValueError("flatten_depth must not be negative")


@dataclass(frozen=True)
class DecodeOptions:
    """Settings for reading TOON text.

    ``delimiter`` of None means it is detected from the input. With
    ``strict`` on, lengths and indentation are checked and path expansion
    conflicts are errors; with it off, the last write wins.
    """

    delimiter: Delimiter | None = None
    strict: bool = True
    coerce_types: bool = True
    indent: Indent = field(default_factory=Indent)
    expand_paths: PathExpansionMode = PathExpansionMode.OFF