"""
Display formatting for quantities and durations.
"""

import math
from decimal import Decimal, ROUND_HALF_UP

# Tried in this order; the first one within tolerance wins.
COMMON_FRACTIONS = (
    (1 / 8, "⅛"),
    (1 / 4, "¼"),
    (1 / 3, "⅓"),
    (3 / 8, "⅜"),
    (1 / 2, "½"),
    (5 / 8, "⅝"),
    (2 / 3, "⅔"),
    (3 / 4, "¾"),
    (7 / 8, "⅞"),
)

FRACTION_TOLERANCE = 0.02


def _round_fixed(num: float, places: int) -> str:
    # Ties round up on the exact binary value: 100.25 -> "100.3", 1.125 -> "1.13"
    quantum = Decimal(1).scaleb(-places)
    return format(Decimal(num).quantize(quantum, rounding=ROUND_HALF_UP), "f")


def _fixed(num: float, places: int) -> str:
    text = _round_fixed(num, places)
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_number(num: float, force_decimals: bool = False) -> str:
    """
    Render a quantity for display, preferring kitchen fractions.

    0.5 -> "½", 1.5 -> "1½", 2 -> "2", 453.592 -> "453.6", 12500 -> "12.5k".
    """
    if not math.isfinite(num) or num < 0:
        return "0"

    if 0 < num < 0.01:
        return "< 0.01"

    if num >= 10000:
        return _fixed(num / 1000, 1) + "k"

    if num >= 100:
        return _fixed(num, 1)

    whole = math.floor(num)
    fraction = num - whole

    if fraction < 0.01:
        return str(whole)

    if force_decimals:
        return _round_fixed(num, 2).rstrip("0").rstrip(".")

    for value, glyph in COMMON_FRACTIONS:
        if abs(fraction - value) < FRACTION_TOLERANCE:
            return f"{whole}{glyph}" if whole > 0 else glyph

    return _fixed(num, 1)


def format_minutes(minutes) -> str:
    """Format minutes as "45 min", "1 hour", "2 hours 15 min"."""
    if not minutes:
        return "0 min"

    minutes = int(minutes)
    if minutes < 60:
        return f"{minutes} min"

    hours, remaining = divmod(minutes, 60)
    hour_text = "1 hour" if hours == 1 else f"{hours} hours"
    if remaining == 0:
        return hour_text
    return f"{hour_text} {remaining} min"
