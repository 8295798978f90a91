"""Escaping, quoting and splitting of TOON strings."""

from __future__ import annotations

from toonfmt.delimiter import Delimiter
from toonfmt.literal import is_literal_like, is_structural_char

_ESCAPES = {
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    '"': '\\"',
    "\\": "\\\\",
}

_UNESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}


def escape_string(s: str) -> str:
    """Escape newlines, carriage returns, tabs, quotes and backslashes."""
    return "".join(_ESCAPES.get(ch, ch) for ch in s)


def unescape_string(s: str) -> str:
    """Undo the escapes of a quoted string.

    Only ``\\\\``, ``\\"``, ``\\n``, ``\\r`` and ``\\t`` are valid; any other
    escape, or a backslash at the very end, raises ValueError.
    """
    out: list[str] = []
    chars = iter(enumerate(s, start=1))
    for position, ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        nxt = next(chars, None)
        if nxt is None:
            raise ValueError(
                "Unterminated escape sequence at end of string "
                f"(position {position})"
            )
        _, escaped = nxt
        try:
            out.append(_UNESCAPES[escaped])
        except KeyError:
            raise ValueError(
                f"Invalid escape sequence '\\{escaped}' at position {position}. "
                'Only \\\\, \\", \\n, \\r, \\t are valid'
            ) from None
    return "".join(out)


def is_valid_unquoted_key(key: str) -> bool:
    """Whether ``key`` can be written bare: a letter or underscore, then
    letters, digits, underscores or dots."""
    if not key:
        return False
    first, rest = key[0], key[1:]
    if not (first.isalpha() or first == "_"):
        return False
    return all(c.isalnum() or c in "_." for c in rest)


def _delimiter_char(delimiter: Delimiter | str) -> str:
    return delimiter.value if isinstance(delimiter, Delimiter) else delimiter


def needs_quoting(s: str, delimiter: Delimiter | str) -> bool:
    """Whether ``s`` must be quoted when written with the given delimiter."""
    if not s:
        return True
    if is_literal_like(s):
        return True
    if any(is_structural_char(c) for c in s):
        return True
    if "\\" in s or '"' in s:
        return True
    if _delimiter_char(delimiter) in s:
        return True
    if any(c in s for c in "\n\r\t"):
        return True
    if s[0].isspace() or s[-1].isspace():
        return True
    if s.startswith("-"):
        return True
    if s.startswith("0") and len(s) > 1 and "0" <= s[1] <= "9":
        return True
    return False


def quote_string(s: str) -> str:
    """Wrap ``s`` in double quotes, escaping its contents."""
    return f'"{escape_string(s)}"'


def split_by_delimiter(s: str, delimiter: Delimiter) -> list[str]:
    """Split ``s`` on the delimiter outside quotes, trimming each part.

    Quotes are kept in the parts; an empty trailing part is dropped.
    """
    delim = _delimiter_char(delimiter)
    parts: list[str] = []
    current: list[str] = []
    in_quotes = False
    for ch in s:
        if ch == '"' and (not current or current[-1] != "\\"):
            in_quotes = not in_quotes
            current.append(ch)
        elif ch == delim and not in_quotes:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    if current:
        parts.append("".join(current).strip())
    return parts