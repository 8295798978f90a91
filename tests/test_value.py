import json

import pytest

from toonfmt.value import display, is_integer, type_name


@pytest.mark.parametrize(
    "value, name",
    [
        (None, "null"),
        (True, "boolean"),
        (False, "boolean"),
        (42, "number"),
        (1.5, "number"),
        ("x", "string"),
        ([1, 2], "array"),
        ({"a": 1}, "object"),
    ],
)
def test_type_name(value, name):
    assert type_name(value) == name


def test_type_name_rejects_other_types():
    with pytest.raises(TypeError):
        type_name(object())


@pytest.mark.parametrize("value", [0, -7, 12591154125385152738, 3.0, -2.0])
def test_is_integer_true(value):
    assert is_integer(value) is True


@pytest.mark.parametrize("value", [0.5, -1.25, float("inf"), float("nan")])
def test_is_integer_false(value):
    assert is_integer(value) is False


@pytest.mark.parametrize("value", ["1", True, None])
def test_is_integer_rejects_non_numbers(value):
    with pytest.raises(TypeError):
        is_integer(value)


def test_display_scalars():
    assert display(None) == "null"
    assert display(True) == "true"
    assert display(False) == "false"


@pytest.mark.parametrize(
    "value",
    [
        {"name": "Alice", "age": 30, "score": 1.5},
        [1, "two", True, None],
        {"nested": {"key": "value"}, "array": [1, 2, 3]},
        {"empty_array": [], "empty_object": {}},
        [12591154125385152738, 18446744073709551615],
    ],
)
def test_display_matches_json_for_plain_values(value):
    assert display(value) == json.dumps(value)


def test_display_keeps_key_order():
    text = display({"b": 1, "a": 2})
    assert text.index('"b"') < text.index('"a"')


def test_display_non_finite_is_zero():
    assert display(float("inf")) == display(0)
    assert display(float("nan")) == display(0)


def test_display_exponent_has_no_plus_sign():
    text = display(1e20)
    assert "+" not in text
    assert float(text) == 1e20


def test_display_small_float_round_trips():
    text = display(1e-7)
    assert float(text) == 1e-7
    assert "e-0" not in text


def test_display_rejects_other_types():
    with pytest.raises(TypeError):
        display({1, 2})