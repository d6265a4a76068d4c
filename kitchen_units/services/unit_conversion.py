"""
Unit Conversion Service.

Converts ingredient amounts between US customary and metric systems and picks
the most readable display unit for the result. Every failure path returns the
input unchanged; nothing here raises for bad amounts.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from ..parsing.quantity import extract_unit, parse_amount
from .formatting import format_number
from .unit_tables import (
    UnitClass,
    UnitSystem,
    lookup_unit,
    temperature_scale,
)

logger = logging.getLogger(__name__)

# --- Types ---

@dataclass(frozen=True)
class DisplayUnit:
    value: float
    unit: str

    def render(self) -> str:
        return f"{format_number(self.value)} {self.unit}"


def _label(value: float, singular: str, plural: str) -> str:
    # Singular only when the number will be shown as "1"
    return singular if format_number(value) == "1" else plural


# --- Temperature ---

def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def convert_temperature(value: float, from_scale: str, to_scale: str) -> float:
    """Affine conversion between "f" and "c". Same scale returns value."""
    if from_scale == "f" and to_scale == "c":
        return (value - 32) * 5 / 9
    if from_scale == "c" and to_scale == "f":
        return value * 9 / 5 + 32
    return value


# --- Best unit selection ---

def choose_best_us_unit(value: float, unit_class: UnitClass) -> DisplayUnit:
    """
    Select a readable US unit.
    value is in cups for volume and ounces for weight.
    """
    if unit_class == UnitClass.VOLUME:
        if value < 1 / 16:  # under 1 tbsp
            tsp = value * 48
            if tsp < 0.1:
                return DisplayUnit(value * 768, "drops")
            return DisplayUnit(tsp, "tsp")
        if value < 0.25:
            return DisplayUnit(value * 16, "tbsp")
        if value < 4:
            return DisplayUnit(value, _label(value, "cup", "cups"))
        if value < 16:
            quarts = value / 4
            return DisplayUnit(quarts, _label(quarts, "quart", "quarts"))
        gallons = value / 16
        return DisplayUnit(gallons, _label(gallons, "gallon", "gallons"))

    if value < 16:
        return DisplayUnit(value, "oz")
    pounds = value / 16
    return DisplayUnit(pounds, _label(pounds, "lb", "lbs"))


def choose_best_metric_unit(value: float, base_unit: str) -> DisplayUnit:
    """Select ml/L or g/kg. value is in the base unit (ml or g)."""
    if base_unit == "ml":
        if value >= 1000:
            return DisplayUnit(value / 1000, "L")
        return DisplayUnit(value, "ml")

    if value >= 1000:
        return DisplayUnit(value / 1000, "kg")
    return DisplayUnit(value, "g")


# --- Core Functions ---

def convert_amount(amount: str, from_system: UnitSystem, to_system: UnitSystem) -> str:
    """
    Convert an amount string between "us" and "metric".

    "1 cup" -> "240 ml", "350°F" -> "177°C", "500 ml" -> "2.1 cups".
    Unparseable amounts and unknown units come back untouched.
    Temperatures are only read in the source system's scale, so "20°C"
    given as US input passes through instead of being treated as Fahrenheit.
    """
    if from_system == to_system:
        return amount

    if not amount or not isinstance(amount, str) or not amount.strip():
        return amount

    parsed = parse_amount(amount)
    if parsed is None or parsed.magnitude <= 0:
        return amount

    value = parsed.magnitude
    token = parsed.raw_unit

    # Temperatures are read in the source system's scale only, so "1 c" stays a cup
    scale = temperature_scale(token)
    if from_system == "us" and to_system == "metric" and scale == "f":
        return f"{_round_half_up(convert_temperature(value, 'f', 'c'))}°C"
    if from_system == "metric" and to_system == "us" and scale == "c":
        return f"{_round_half_up(convert_temperature(value, 'c', 'f'))}°F"

    info = lookup_unit(token, from_system)
    if info is None:
        logger.debug("No %s unit for %r, leaving amount as is", from_system, token)
        return amount

    converted = value * info.factor
    if to_system == "metric":
        best = choose_best_metric_unit(converted, info.base_unit)
    else:
        best = choose_best_us_unit(converted, info.unit_class)
    return best.render()


def contains_us_units(amount: str) -> bool:
    """True if the amount ends in a US volume/weight unit or Fahrenheit."""
    if not amount or not isinstance(amount, str):
        return False
    unit = extract_unit(amount)
    if not unit:
        return False
    if temperature_scale(unit) == "f":
        return True
    return lookup_unit(unit, "us") is not None


def contains_metric_units(amount: str) -> bool:
    """True if the amount ends in a metric volume/weight unit or Celsius."""
    if not amount or not isinstance(amount, str):
        return False
    unit = extract_unit(amount)
    if not unit:
        return False
    # A bare "c" reads as cups here, not Celsius
    if temperature_scale(unit) == "c" and lookup_unit(unit, "us") is None:
        return True
    return lookup_unit(unit, "metric") is not None


def detect_system(amount: str) -> Optional[UnitSystem]:
    """Which system an amount is written in, if any."""
    if contains_us_units(amount):
        return "us"
    if contains_metric_units(amount):
        return "metric"
    return None
