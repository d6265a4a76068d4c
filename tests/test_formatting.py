import pytest
from kitchen_units.services.formatting import format_number, format_minutes


@pytest.mark.parametrize("num,expected", [
    (0.5, "½"),
    (1.5, "1½"),
    (0.25, "¼"),
    (0.75, "¾"),
    (0.333, "⅓"),
    (0.125, "⅛"),
    (1.875, "1⅞"),
    (0.66, "⅔"),
    (2, "2"),
    (2.004, "2"),
    (0, "0"),
    (0.43, "0.4"),
    (14.787, "14.8"),
])
def test_format_number_fractions(num, expected):
    assert format_number(num) == expected


def test_format_number_edges():
    assert format_number(-1) == "0"
    assert format_number(0.005) == "< 0.01"
    assert format_number(150) == "150"
    assert format_number(123.44) == "123.4"
    assert format_number(10000) == "10k"
    assert format_number(12500) == "12.5k"
    assert format_number(float("nan")) == "0"
    assert format_number(float("inf")) == "0"


def test_format_number_force_decimals():
    assert format_number(1.5, force_decimals=True) == "1.5"
    assert format_number(1.2345, force_decimals=True) == "1.23"
    assert format_number(0.25, force_decimals=True) == "0.25"
    assert format_number(3, force_decimals=True) == "3"


def test_format_number_rounds_ties_up():
    assert format_number(100.25) == "100.3"
    assert format_number(12250) == "12.3k"
    assert format_number(1.125, force_decimals=True) == "1.13"


@pytest.mark.parametrize("minutes,expected", [
    (None, "0 min"),
    (0, "0 min"),
    (45, "45 min"),
    (60, "1 hour"),
    (90, "1 hour 30 min"),
    (120, "2 hours"),
    (135, "2 hours 15 min"),
])
def test_format_minutes(minutes, expected):
    assert format_minutes(minutes) == expected
