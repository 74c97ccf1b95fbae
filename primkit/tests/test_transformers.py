"""
Tests for number, file size, badge, date and string transformers.
"""

from datetime import datetime, timezone

import pytest

from primkit.core.errors import UnsupportedDataTypeError
from primkit.transformers import (
    DATE_TEMPLATES,
    NumberFormatConfig,
    build_number_format_config,
    capitalize_first,
    mask_middle,
    prettify_badge_count,
    prettify_date,
    prettify_file_size,
    prettify_number,
    to_slug,
    to_title_case,
    truncate_text,
)
from primkit.validations import MAX_SAFE_INTEGER

SAMPLE_DATE = datetime(2024, 1, 5, 14, 30, 45, tzinfo=timezone.utc)
SAMPLE_TIMESTAMP = 1704465045000


@pytest.mark.parametrize(
    "value, config, expected",
    [
        (1000.58, None, "1,000.58"),
        (1000, None, "1,000"),
        (0.125, None, "0.13"),
        (-0.001, None, "0"),
        (-1234.5, None, "-1,234.5"),
        (65544152361.6432, {"maximum_fraction_digits": 3}, "65,544,152,361.643"),
        (1000.5, {"minimum_fraction_digits": 2, "prefix": "$"}, "$1,000.50"),
        (1.5, {"suffix": " BTC"}, "1.5 BTC"),
        (2, {"minimum_fraction_digits": 4}, "2.0000"),
        (1.99, {"maximum_fraction_digits": 0}, "2"),
        (float("nan"), None, "NaN"),
        (float("inf"), {"prefix": "$"}, "$∞"),
    ],
)
def test_prettify_number(value, config, expected):
    assert prettify_number(value, config) == expected


def test_prettify_number_accepts_config_object():
    cfg = NumberFormatConfig(minimum_fraction_digits=1, maximum_fraction_digits=1, suffix="%")
    assert prettify_number(12.345, cfg) == "12.3%"


def test_build_number_format_config():
    """A minimum above the default maximum raises the maximum too."""
    assert build_number_format_config() == NumberFormatConfig()
    assert build_number_format_config({"minimum_fraction_digits": 4}).maximum_fraction_digits == 4


def test_number_format_config_rejects_inverted_range():
    with pytest.raises(ValueError):
        NumberFormatConfig(minimum_fraction_digits=3, maximum_fraction_digits=2)
    with pytest.raises(ValueError):
        NumberFormatConfig(minimum_fraction_digits=-1)


@pytest.mark.parametrize(
    "value, decimal_places, expected",
    [
        (1000, 2, "1000 B"),
        (1, 2, "1 B"),
        (2785, 2, "2.72 kB"),
        (85545, 6, "83.540039 kB"),
        (977615, 1, "954.7 kB"),
        (1211423, 2, "1.16 MB"),
        (79551423, 2, "75.87 MB"),
        (99479551423, 2, "92.65 GB"),
        (MAX_SAFE_INTEGER, 2, "8.00 PB"),
        (0, 2, "0 B"),
        (-5, 2, "0 B"),
        (float("nan"), 2, "0 B"),
        (float("inf"), 2, "0 B"),
        ("2785", 2, "0 B"),
        (None, 2, "0 B"),
        (True, 2, "0 B"),
    ],
)
def test_prettify_file_size(value, decimal_places, expected):
    assert prettify_file_size(value, decimal_places) == expected


@pytest.mark.parametrize(
    "value, max_value, expected",
    [
        (0, 9, ""),
        (-1, 9, ""),
        ("3", 9, ""),
        (None, 9, ""),
        (1, 9, "1"),
        (9, 9, "9"),
        (10, 9, "9+"),
        (100, 99, "99+"),
        (50, 99, "50"),
    ],
)
def test_prettify_badge_count(value, max_value, expected):
    assert prettify_badge_count(value, max_value) == expected


@pytest.mark.parametrize("template, expected", list(DATE_TEMPLATES.items()))
def test_prettify_date_templates(template, expected):
    """Every template renders the documented example."""
    assert prettify_date(SAMPLE_DATE, template) == expected


@pytest.mark.parametrize("value", [SAMPLE_TIMESTAMP, float(SAMPLE_TIMESTAMP), "2024-01-05T14:30:45+00:00"])
def test_prettify_date_input_types(value):
    """Timestamps are read as UTC milliseconds and ISO strings are parsed."""
    assert prettify_date(value, "datetime-long") == DATE_TEMPLATES["datetime-long"]


def test_prettify_date_noon_and_midnight():
    midnight = datetime(2024, 3, 1, 0, 5, tzinfo=timezone.utc)
    noon = datetime(2024, 3, 1, 12, 5, tzinfo=timezone.utc)

    assert prettify_date(midnight, "time-short") == "12:05 AM"
    assert prettify_date(noon, "time-short") == "12:05 PM"


def test_prettify_date_errors():
    with pytest.raises(UnsupportedDataTypeError):
        prettify_date(SAMPLE_DATE, "date-huge")
    with pytest.raises(UnsupportedDataTypeError):
        prettify_date("not-a-date", "date-short")
    with pytest.raises(UnsupportedDataTypeError):
        prettify_date([], "date-short")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("hello world", "Hello world"),
        ("hELLO", "HELLO"),
        ("1abc", "1abc"),
        ("", ""),
    ],
)
def test_capitalize_first(value, expected):
    assert capitalize_first(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("JESUS GRATEROL", "Jesus Graterol"),
        ("hello world", "Hello World"),
        ("hello  world", "Hello  World"),
        ("a", "A"),
        ("", ""),
    ],
)
def test_to_title_case(value, expected):
    assert to_title_case(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("This Should work!!@", "this-should-work"),
        ("Hello World", "hello-world"),
        ("Héllo Wörld", "hello-world"),
        ("  --foo__bar--  ", "foo-bar"),
        ("already-a-slug", "already-a-slug"),
        ("!!!", ""),
    ],
)
def test_to_slug(value, expected):
    assert to_slug(value) == expected


@pytest.mark.parametrize(
    "value, max_length, expected",
    [
        ("Hello", 10, "Hello"),
        ("Hello", 5, "Hello"),
        ("Hello World", 8, "Hello..."),
        ("Hello World", 9, "Hello..."),
        ("Hello World", 2, ".."),
        ("Hello World", 0, ""),
    ],
)
def test_truncate_text(value, max_length, expected):
    result = truncate_text(value, max_length)

    assert result == expected
    assert len(result) <= max_length


def test_truncate_text_custom_ellipsis_and_errors():
    assert truncate_text("Hello World", 6, "…") == "Hello…"
    with pytest.raises(ValueError):
        truncate_text("Hello", -1)


@pytest.mark.parametrize(
    "value, visible_chars, mask_char, expected",
    [
        ("4111111111111111", 4, "*", "4111********1111"),
        ("secret-token", 2, "#", "se########en"),
        ("abcdefgh", 4, "*", "********"),
        ("abc", 4, "*", "***"),
        ("abc", 0, "*", "***"),
        ("", 4, "*", ""),
    ],
)
def test_mask_middle(value, visible_chars, mask_char, expected):
    assert mask_middle(value, visible_chars, mask_char) == expected


def test_mask_middle_rejects_negative():
    with pytest.raises(ValueError):
        mask_middle("abc", -1)
