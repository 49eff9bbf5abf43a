import pytest

from cubecaster.colors import ColorError, parse_color, validate_color
from cubecaster.constants import (
    COLOR_BLACK,
    COLOR_BLUE,
    COLOR_GREEN,
    COLOR_RED,
    COLOR_WHITE,
)
from cubecaster.utils import CubError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("255,0,0", COLOR_RED),
        ("0,255,0", COLOR_GREEN),
        ("0,0,255", COLOR_BLUE),
        ("255,255,255", COLOR_WHITE),
        ("0,0,0", COLOR_BLACK),
    ],
)
def test_validate_color_known_values(text, expected):
    assert validate_color(text) == expected


@pytest.mark.parametrize("rgb", [(220, 100, 0), (1, 2, 3), (0, 128, 255), (17, 0, 99)])
def test_validate_color_round_trip(rgb):
    r, g, b = rgb
    value = validate_color(f"{r},{g},{b}")
    assert (value >> 16) & 0xFF == r
    assert (value >> 8) & 0xFF == g
    assert value & 0xFF == b


def test_validate_color_accepts_leading_zeros():
    assert validate_color("007,000,255") == validate_color("7,0,255")


@pytest.mark.parametrize(
    "text",
    [None, "", "255,0", "1,2,3,4", "1, 2, 3", "a,b,c", "-1,0,0", "1,,2", ",1,2", "1.0,2,3"],
)
def test_validate_color_rejects_bad_format(text):
    with pytest.raises(ColorError, match="Invalid color format"):
        validate_color(text)


@pytest.mark.parametrize("text", ["256,0,0", "0,300,0", "0,0,999"])
def test_validate_color_rejects_out_of_range(text):
    with pytest.raises(ColorError, match="between 0 and 255"):
        validate_color(text)


def test_color_error_is_cub_error_and_value_error():
    with pytest.raises(CubError):
        validate_color("x")
    with pytest.raises(ValueError):
        validate_color("x")


def test_parse_color_matches_validate_on_clean_input():
    for text in ["220,100,0", "255,255,255", "0,0,0"]:
        assert parse_color(text) == validate_color(text)


def test_parse_color_tolerates_spaces_and_signs():
    assert parse_color(" 255, +0,  0") == COLOR_RED


def test_parse_color_skips_empty_fields_and_extra_values():
    assert parse_color(",,0,,255,0,9") == COLOR_GREEN


def test_parse_color_non_numeric_fields_read_as_zero():
    assert parse_color("abc,def,ghi") == COLOR_BLACK


@pytest.mark.parametrize("text", ["", "1,2", ",,,", "10"])
def test_parse_color_needs_three_fields(text):
    with pytest.raises(ColorError):
        parse_color(text)


@pytest.mark.parametrize("text", ["-1,0,0", "0,256,0", "0,0,1000"])
def test_parse_color_range(text):
    with pytest.raises(ColorError):
        parse_color(text)