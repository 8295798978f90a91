"""Building blocks for Token-Oriented Object Notation (TOON): delimiters,
quoting, number formatting, normalisation, validation, options and errors."""

__version__ = "0.4.5"

__all__ = [
    "delimiter",
    "errors",
    "folding",
    "literal",
    "normalize",
    "number",
    "options",
    "strings",
    "validation",
    "value",
]