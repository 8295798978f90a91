"""Errors raised while encoding or decoding TOON, with optional source context."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass
class ErrorContext:
    """Source location details and hints attached to an error."""

    source_line: str
    preceding_lines: list[str] = field(default_factory=list)
    following_lines: list[str] = field(default_factory=list)
    suggestion: str | None = None
    indicator: str | None = None

    def with_preceding_lines(self, lines: list[str]) -> ErrorContext:
        return replace(self, preceding_lines=list(lines))

    def with_following_lines(self, lines: list[str]) -> ErrorContext:
        return replace(self, following_lines=list(lines))

    def with_suggestion(self, suggestion: str) -> ErrorContext:
        return replace(self, suggestion=str(suggestion))

    def with_indicator(self, column: int) -> ErrorContext:
        """Add a caret placed ``column`` spaces in."""
        return replace(self, indicator=" " * column + "^")

    @classmethod
    def from_input(
        cls, text: str, line: int, column: int, context_lines: int
    ) -> ErrorContext | None:
        """Build a context around 1-based ``line`` of ``text``; None if out of range."""
        lines = _split_lines(text)
        if line == 0 or line > len(lines):
            return None
        idx = line - 1
        start = max(idx - context_lines, 0)
        end = min(idx + context_lines + 1, len(lines))
        return cls(
            source_line=lines[idx],
            preceding_lines=lines[start:idx],
            following_lines=lines[idx + 1 : end],
            indicator=" " * max(column - 1, 0) + "^",
        )

    def __str__(self) -> str:
        out = ["", "Context:"]
        out.extend(f"  {line}" for line in self.preceding_lines)
        out.append(f"> {self.source_line}")
        if self.indicator is not None:
            out.append(f"  {self.indicator}")
        out.extend(f"  {line}" for line in self.following_lines)
        if self.suggestion is not None:
            out.append("")
            out.append(f"Suggestion: {self.suggestion}")
        return "\n".join(out) + "\n"


def _split_lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


class ToonError(Exception):
    """Base class for all TOON errors."""

    def with_context(self, context: ErrorContext) -> ToonError:
        """Attach context where the error kind supports it; return the error."""
        return self

    def with_suggestion(self, suggestion: str) -> ToonError:
        """Attach a suggestion where the error kind supports it; return the error."""
        return self


class InvalidInputError(ToonError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid input: {detail}")


class ParseError(ToonError):
    def __init__(
        self,
        line: int,
        column: int,
        message: str,
        context: ErrorContext | None = None,
    ) -> None:
        self.line = line
        self.column = column
        self.message = message
        self.context = context
        super().__init__(f"Parse error at line {line}, column {column}: {message}")

    def with_context(self, context: ErrorContext) -> ParseError:
        self.context = context
        return self

    def with_suggestion(self, suggestion: str) -> ParseError:
        base = self.context if self.context is not None else ErrorContext("")
        self.context = base.with_suggestion(suggestion)
        return self


class InvalidCharacterError(ToonError):
    def __init__(self, char: str, position: int) -> None:
        self.char = char
        self.position = position
        super().__init__(f"Invalid character '{char}' at position {position}")


class UnexpectedEofError(ToonError):
    def __init__(self) -> None:
        super().__init__("Unexpected end of input")


class TypeMismatchError(ToonError):
    def __init__(self, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"Type mismatch: expected {expected}, found {found}")


class InvalidDelimiterError(ToonError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid delimiter: {detail}")


class LengthMismatchError(ToonError):
    def __init__(
        self, expected: int, found: int, context: ErrorContext | None = None
    ) -> None:
        self.expected = expected
        self.found = found
        self.context = context
        super().__init__(
            f"Array length mismatch: expected {expected}, found {found}"
        )

    def with_context(self, context: ErrorContext) -> LengthMismatchError:
        self.context = context
        return self


class InvalidStructureError(ToonError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid structure: {detail}")


class SerializationError(ToonError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Serialization error: {detail}")


class DeserializationError(ToonError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Deserialization error: {detail}")