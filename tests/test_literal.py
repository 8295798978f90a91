import pytest

from toonfmt.literal import (
    is_keyword,
    is_literal_like,
    is_numeric_like,
    is_structural_char,
)


@pytest.mark.parametrize("s", ["null", "true", "false", "123", "-456", "3.14"])
def test_is_literal_like_true(s):
    assert is_literal_like(s) is True


@pytest.mark.parametrize("s", ["hello", ""])
def test_is_literal_like_false(s):
    assert is_literal_like(s) is False


def test_is_keyword():
    assert is_keyword("null")
    assert is_keyword("true")
    assert is_keyword("false")
    assert not is_keyword("TRUE")
    assert not is_keyword("hello")


def test_is_structural_char():
    assert is_structural_char("[")
    assert is_structural_char("{")
    assert is_structural_char(":")
    assert not is_structural_char("a")


@pytest.mark.parametrize("s", ["123", "-456", "0", "3.14", "1e10", "1.5e-3"])
def test_is_numeric_like_true(s):
    assert is_numeric_like(s) is True


@pytest.mark.parametrize("s", ["", "-", "abc", "01", "00"])
def test_is_numeric_like_false(s):
    assert is_numeric_like(s) is False


def test_non_ascii_digits_are_not_numeric():
    assert is_numeric_like("\u0661\u0662") is False


def test_trailing_letters_are_not_numeric():
    assert is_numeric_like("12abc") is False