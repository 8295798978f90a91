# toonfmt

Core pieces for working with TOON (Token-Oriented Object Notation), a compact,
token-efficient alternative to JSON for prompts: delimiters, quoting and
escaping rules, canonical number formatting, value normalisation, validation,
encode/decode option types and a structured error hierarchy.

Values are plain Python data: `None`, `bool`, `int`, `float`, `str`, `list`
and `dict`.

## Installation

```
pip install toonfmt
```

## Modules

| Module | Contents |
| --- | --- |
| `toonfmt.delimiter` | `Delimiter` enum (`COMMA`, `TAB`, `PIPE`), `from_char`, `contains_in`, `as_metadata_str` |
| `toonfmt.strings` | `escape_string`, `unescape_string`, `quote_string`, `needs_quoting`, `is_valid_unquoted_key`, `split_by_delimiter` |
| `toonfmt.literal` | `is_keyword`, `is_numeric_like`, `is_literal_like`, `is_structural_char` |
| `toonfmt.number` | `format_canonical_number`, `remove_trailing_zeros` |
| `toonfmt.normalize` | `normalize`, `QuotingContext` |
| `toonfmt.folding` | `KeyFoldingMode`, `PathExpansionMode`, `is_identifier_segment` |
| `toonfmt.options` | `Indent`, `EncodeOptions`, `DecodeOptions` |
| `toonfmt.value` | `type_name`, `is_integer`, `display` |
| `toonfmt.validation` | `validate_depth`, `validate_field_name`, `validate_value` |
| `toonfmt.errors` | `ToonError` and its subclasses, `ErrorContext` |

## Delimiters

```python
from toonfmt.delimiter import Delimiter

Delimiter.from_char("|")              # Delimiter.PIPE
Delimiter.from_char("x")              # None
Delimiter.TAB.contains_in("a\tb")     # True
Delimiter.COMMA.as_metadata_str()     # ''
Delimiter.PIPE.as_metadata_str()      # '|'
```

## Quoting and escaping

```python
from toonfmt.delimiter import Delimiter
from toonfmt.strings import needs_quoting, quote_string, unescape_string, split_by_delimiter

needs_quoting("a,b", ",")          # True
needs_quoting("a,b", "|")          # False
quote_string("hello\nworld")       # '"hello\\nworld"'
unescape_string("tab\\there")      # 'tab\there'
split_by_delimiter('"a,b",c', Delimiter.COMMA)   # ['"a,b"', 'c']
```

`needs_quoting` accepts either a `Delimiter` or its character.
`unescape_string` raises `ValueError` on escape sequences other than
`\\`, `\"`, `\n`, `\r` and `\t`, and on a backslash at the end of the string.

## Numbers and normalisation

```python
from toonfmt.number import format_canonical_number
from toonfmt.normalize import normalize

format_canonical_number(1e9)     # '1000000000'
format_canonical_number(-1.5)    # '-1.5'
normalize({"a": float("nan"), "b": -0.0})   # {'a': None, 'b': 0}
```

Canonical numbers never use an exponent and carry no trailing zeros.

## Keys and literals

```python
from toonfmt.folding import is_identifier_segment
from toonfmt.literal import is_literal_like

is_identifier_segment("user_name")   # True
is_identifier_segment("a.b")         # False
is_literal_like("3.14")              # True
```

## Options

```python
from toonfmt.delimiter import Delimiter
from toonfmt.folding import KeyFoldingMode
from toonfmt.options import EncodeOptions, DecodeOptions, Indent

enc = EncodeOptions(delimiter=Delimiter.PIPE, indent=Indent(4), key_folding=KeyFoldingMode.SAFE)
dec = DecodeOptions(strict=False)
Indent(2).string(3)    # six spaces
```

The option classes are frozen dataclasses. `Indent` rejects a negative
number of spaces and `EncodeOptions` a negative `flatten_depth`, with
`ValueError`.

## Value helpers

```python
from toonfmt.value import display, type_name

type_name([1, 2])               # 'array'
display({"a": [1, None]})       # '{"a": [1, null]}'
```

## Errors

Every error derives from `toonfmt.errors.ToonError`. `ParseError` and
`LengthMismatchError` can carry an `ErrorContext` that renders the offending
line, its neighbours, a caret indicator and a suggestion:

```python
from toonfmt.errors import ErrorContext, ParseError

ctx = ErrorContext.from_input("a: 1\nb 2\nc: 3", 2, 3, 1)
err = ParseError(2, 3, "Expected ':'").with_context(ctx).with_suggestion("Add a colon")
print(err)
print(err.context)
```

## Validation

```python
from toonfmt.validation import validate_depth, validate_value

validate_value({"": 1})   # raises InvalidInputError
validate_depth(11, 10)    # raises InvalidStructureError
```

## What this package does not do

It does not turn values into TOON documents or read TOON documents back:
there is no encoder or decoder here, only the pieces such a codec is built
from. It has no command-line tool.

## Running the tests

```
pip install -e .[test]
pytest
```