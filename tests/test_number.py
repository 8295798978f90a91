import math

import pytest

from toonfmt.number import format_canonical_number, remove_trailing_zeros


def test_format_canonical_integers():
    assert format_canonical_number(42) == "42"
    assert format_canonical_number(-123) == "-123"
    assert format_canonical_number(0) == "0"


def test_format_canonical_floats():
    assert format_canonical_number(1.0) == "1"
    assert format_canonical_number(42.0) == "42"
    assert format_canonical_number(1.5) == "1.5"
    result = format_canonical_number(math.pi)
    assert result.startswith("3.141592653589793")
    assert "e" not in result
    assert "E" not in result


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.5000", "1.5"),
        ("1.0", "1"),
        ("1.500", "1.5"),
        ("42", "42"),
        ("0.0", "0"),
        ("1.23", "1.23"),
    ],
)
def test_remove_trailing_zeros(text, expected):
    assert remove_trailing_zeros(text) == expected


def test_large_numbers_no_exponent():
    assert format_canonical_number(1_000_000.0) == "1000000"
    assert format_canonical_number(1_000_000_000.0) == "1000000000"


def test_small_numbers_no_exponent():
    result = format_canonical_number(0.000001)
    assert result.startswith("0.000001")
    assert "e" not in result
    assert "E" not in result
    assert format_canonical_number(0.001) == "0.001"


def test_pi_formatting():
    result = format_canonical_number(math.pi)
    assert "e" not in result
    assert "E" not in result
    assert result.startswith("3.14159")


def test_from_json_values():
    assert format_canonical_number(1000000) == "1000000"
    assert format_canonical_number(1.5000) == "1.5"


def test_negative_numbers():
    assert format_canonical_number(-1.5) == "-1.5"
    assert format_canonical_number(-42) == "-42"
    assert format_canonical_number(-1000000.0) == "-1000000"


def test_exponent_forms_are_expanded():
    assert format_canonical_number(1.23e10) == "12300000000"
    assert format_canonical_number(1e-7) == "0.0000001"
    assert format_canonical_number(1e20) == "100000000000000000000"


def test_negative_zero_float():
    assert format_canonical_number(-0.0) == "0"


def test_large_unsigned_integer():
    assert format_canonical_number(12591154125385152738) == "12591154125385152738"


@pytest.mark.parametrize("bad", [True, "1", None])
def test_non_numbers_rejected(bad):
    with pytest.raises(TypeError):
        format_canonical_number(bad)