"""
Quantity expression parsing.

Turns the numeric prefix of an ingredient amount ("1 1/2", "¾", "2-3") into
a float and splits amounts into their number and unit portions.
"""

import math
import re
from dataclasses import dataclass
from typing import Optional, Tuple

# --- Fraction vocabulary ---

UNICODE_FRACTIONS = {
    "¼": 1 / 4,
    "½": 1 / 2,
    "¾": 3 / 4,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "⅛": 1 / 8,
    "⅜": 3 / 8,
    "⅝": 5 / 8,
    "⅞": 7 / 8,
    "⅕": 1 / 5,
    "⅖": 2 / 5,
    "⅗": 3 / 5,
    "⅘": 4 / 5,
    "⅙": 1 / 6,
    "⅚": 5 / 6,
}

FRACTION_GLYPHS = "".join(UNICODE_FRACTIONS)

# --- Patterns ---

_MIXED_UNICODE_RE = re.compile(rf"^(\d+)\s*([{FRACTION_GLYPHS}])$")
_MIXED_TEXT_RE = re.compile(r"^(\d+)\s+(\d+)/(\d+)$")
_FRACTION_RE = re.compile(r"^(\d+(?:\.\d+)?)\s*/\s*(\d+(?:\.\d+)?)$")
_RANGE_RE = re.compile(r"^(\d+\.?\d*)\s*-\s*(\d+\.?\d*)$")
_DECIMAL_RE = re.compile(r"^(\d+\.?\d*|\.\d+)$")

# "2 cups", "1.5ml", "1 1/2 tsp", "2-3 tbsp", "¾ cup"
AMOUNT_RE = re.compile(rf"^([\d./\s\-{FRACTION_GLYPHS}]+)\s*(.*)$", re.DOTALL)

# Trailing unit token: "cups", "°F", "#", "fl. oz" -> "oz"
_TRAILING_UNIT_RE = re.compile(r"[a-zA-Z°#.]+\s*$")


@dataclass(frozen=True)
class ParsedQuantity:
    magnitude: float
    unit: str
    raw_unit: str = ""


def _finite(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


def parse_number(text: str) -> Optional[float]:
    """
    Parse a quantity literal.

    Handles unicode vulgar fractions, mixed numbers ("1 1/2", "1½"),
    ASCII fractions, ranges ("1-2" -> 1.5) and decimals.
    Returns None for anything it cannot read; never raises.
    """
    if not isinstance(text, str):
        return None

    s = text.strip()
    if not s:
        return None

    if s in UNICODE_FRACTIONS:
        return UNICODE_FRACTIONS[s]

    m = _MIXED_UNICODE_RE.match(s)
    if m:
        return int(m.group(1)) + UNICODE_FRACTIONS[m.group(2)]

    m = _MIXED_TEXT_RE.match(s)
    if m:
        denominator = int(m.group(3))
        if denominator == 0:
            return None
        return int(m.group(1)) + int(m.group(2)) / denominator

    m = _FRACTION_RE.match(s)
    if m:
        denominator = float(m.group(2))
        if denominator == 0:
            return None
        return _finite(float(m.group(1)) / denominator)

    m = _RANGE_RE.match(s)
    if m:
        low = float(m.group(1))
        high = float(m.group(2))
        return _finite((low + high) / 2)

    if _DECIMAL_RE.match(s):
        return _finite(float(s))

    return None


def split_amount(amount: str) -> Optional[Tuple[str, str]]:
    """Split "1 1/2 cups" into ("1 1/2 ", "cups"). None if there is no numeric prefix."""
    if not isinstance(amount, str):
        return None
    m = AMOUNT_RE.match(amount.strip())
    if not m:
        return None
    return m.group(1), m.group(2)


def parse_amount(amount: str) -> Optional[ParsedQuantity]:
    """
    Parse an amount string into magnitude and unit.
    The unit is lowercased; raw_unit keeps the original casing ("T" vs "t").
    """
    parts = split_amount(amount)
    if parts is None:
        return None

    num_part, unit_part = parts
    value = parse_number(num_part)
    if value is None:
        return None

    raw_unit = unit_part.strip()
    return ParsedQuantity(magnitude=value, unit=raw_unit.lower(), raw_unit=raw_unit)


def extract_unit(amount: str) -> str:
    """Return the trailing unit token of an amount, original case preserved."""
    if not isinstance(amount, str):
        return ""
    m = _TRAILING_UNIT_RE.search(amount)
    return m.group(0).strip() if m else ""
