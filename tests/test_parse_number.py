import math

import pytest
from kitchen_units.parsing.quantity import parse_number, parse_amount, split_amount, extract_unit


@pytest.mark.parametrize("text,expected", [
    ("½", 0.5),
    ("¾", 0.75),
    ("⅓", 1 / 3),
    ("⅚", 5 / 6),
    ("1½", 1.5),
    ("1 ½", 1.5),
    ("2 ¼", 2.25),
    ("1 1/2", 1.5),
    ("3/4", 0.75),
    ("2/3", 2 / 3),
    ("1-2", 1.5),
    ("1 - 2", 1.5),
    ("2-3", 2.5),
    ("1.5", 1.5),
    ("2", 2.0),
    (".5", 0.5),
    ("  4  ", 4.0),
])
def test_parse_number_accepts(text, expected):
    assert parse_number(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["", "   ", "abc", "1/0", "1 1/0", "a/b", "1/2/3", "- 2", "one", "2 eggs"])
def test_parse_number_rejects(text):
    assert parse_number(text) is None


def test_parse_number_non_string():
    assert parse_number(None) is None
    assert parse_number(3) is None


def test_parse_number_never_returns_nan():
    for text in ["0/0", "1e400", "9" * 400]:
        value = parse_number(text)
        assert value is None or math.isfinite(value)


def test_split_amount():
    assert split_amount("1 1/2 cups") == ("1 1/2 ", "cups")
    assert split_amount("350°F") == ("350", "°F")
    assert split_amount("1.5ml") == ("1.5", "ml")
    assert split_amount("salt to taste") is None


def test_parse_amount_keeps_raw_case():
    parsed = parse_amount("2 T")
    assert parsed.magnitude == 2
    assert parsed.unit == "t"
    assert parsed.raw_unit == "T"


def test_parse_amount_unreadable():
    assert parse_amount("pinch of salt") is None
    assert parse_amount("1/0 cup") is None


def test_extract_unit():
    assert extract_unit("2 cups") == "cups"
    assert extract_unit("350°F") == "°F"
    assert extract_unit("1 lb ") == "lb"
    assert extract_unit("3") == ""
    assert extract_unit(None) == ""
