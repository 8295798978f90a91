"""Canonical number formatting: plain decimal, no exponent, no trailing zeros."""

from __future__ import annotations

import math
from decimal import Decimal

_I64_MIN = -(2**63)
_U64_LIMIT = 2**64


def remove_trailing_zeros(s: str) -> str:
    """Strip trailing zeros after the decimal point, and the point if nothing is left."""
    if s.count(".") != 1:
        return s
    int_part, frac_part = s.split(".")
    frac_part = frac_part.rstrip("0")
    return f"{int_part}.{frac_part}" if frac_part else int_part


def _format_float(f: float) -> str:
    if math.isnan(f):
        return "NaN"
    if math.isinf(f):
        return "inf" if f > 0 else "-inf"
    if f.is_integer() and _I64_MIN <= f < _U64_LIMIT:
        return str(int(f))
    plain = format(Decimal(repr(f)), "f")
    return remove_trailing_zeros(plain)


def format_canonical_number(n: int | float) -> str:
    """Format ``n`` in TOON canonical form."""
    if isinstance(n, bool) or not isinstance(n, (int, float)):
        raise TypeError(f"not a number: {type(n).__name__}")
    if isinstance(n, int):
        return str(n)
    return _format_float(n)