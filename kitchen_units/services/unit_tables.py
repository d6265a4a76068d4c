"""
Unit lookup tables for US customary <-> metric conversion.

US rows carry the factor to the metric base unit (ml or g).
Metric rows carry the factor to the US base unit (cup or oz).
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Literal, Mapping, Optional

# --- Types ---

UnitSystem = Literal["us", "metric"]


class UnitClass(str, Enum):
    VOLUME = "volume"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class UnitInfo:
    factor: float
    base_unit: str
    display_name: str
    unit_class: UnitClass
    system: str


def _rows(names, factor, base_unit, display_name, unit_class, system):
    info = UnitInfo(factor, base_unit, display_name, unit_class, system)
    return {name: info for name in names}


# --- Data Tables ---

ML_PER_CUP = 240.0
G_PER_OZ = 28.3495

_US_VOLUME = {}
_US_VOLUME.update(_rows(["cup", "cups", "c"], ML_PER_CUP, "ml", "cup", UnitClass.VOLUME, "us"))
_US_VOLUME.update(_rows(
    ["tablespoon", "tablespoons", "tbsp", "tbs", "tb", "T"],
    14.787, "ml", "tbsp", UnitClass.VOLUME, "us",
))
_US_VOLUME.update(_rows(["teaspoon", "teaspoons", "tsp", "t"], 4.929, "ml", "tsp", UnitClass.VOLUME, "us"))
_US_VOLUME.update(_rows(
    ["fluid ounce", "fluid ounces", "fl oz", "fl. oz", "fl.oz", "floz"],
    29.574, "ml", "fl oz", UnitClass.VOLUME, "us",
))
_US_VOLUME.update(_rows(["pint", "pints", "pt"], 473.176, "ml", "pint", UnitClass.VOLUME, "us"))
_US_VOLUME.update(_rows(["quart", "quarts", "qt"], 946.353, "ml", "quart", UnitClass.VOLUME, "us"))
_US_VOLUME.update(_rows(["gallon", "gallons", "gal"], 3785.41, "ml", "gallon", UnitClass.VOLUME, "us"))

_US_WEIGHT = {}
_US_WEIGHT.update(_rows(["ounce", "ounces", "oz"], G_PER_OZ, "g", "oz", UnitClass.WEIGHT, "us"))
_US_WEIGHT.update(_rows(["pound", "pounds", "lb", "lbs", "#"], 453.592, "g", "lb", UnitClass.WEIGHT, "us"))

_METRIC_VOLUME = {}
_METRIC_VOLUME.update(_rows(
    ["ml", "mL", "milliliter", "milliliters", "millilitre", "millilitres"],
    1 / ML_PER_CUP, "cup", "ml", UnitClass.VOLUME, "metric",
))
_METRIC_VOLUME.update(_rows(
    ["l", "L", "liter", "liters", "litre", "litres"],
    1000 / ML_PER_CUP, "cup", "L", UnitClass.VOLUME, "metric",
))

_METRIC_WEIGHT = {}
_METRIC_WEIGHT.update(_rows(["g", "gram", "grams", "gr"], 1 / G_PER_OZ, "oz", "g", UnitClass.WEIGHT, "metric"))
_METRIC_WEIGHT.update(_rows(
    ["kg", "kilogram", "kilograms", "kilo", "kilos"],
    1000 / G_PER_OZ, "oz", "kg", UnitClass.WEIGHT, "metric",
))

US_VOLUME: Mapping[str, UnitInfo] = MappingProxyType(_US_VOLUME)
US_WEIGHT: Mapping[str, UnitInfo] = MappingProxyType(_US_WEIGHT)
METRIC_VOLUME: Mapping[str, UnitInfo] = MappingProxyType(_METRIC_VOLUME)
METRIC_WEIGHT: Mapping[str, UnitInfo] = MappingProxyType(_METRIC_WEIGHT)

# Compared after lowercasing and stripping "°", whitespace and "."
FAHRENHEIT_TOKENS = frozenset({"f", "fahrenheit", "degf"})
CELSIUS_TOKENS = frozenset({"c", "celsius", "degc"})
TEMPERATURE_TOKENS = FAHRENHEIT_TOKENS | CELSIUS_TOKENS

_TABLES = {
    "us": (US_VOLUME, US_WEIGHT),
    "metric": (METRIC_VOLUME, METRIC_WEIGHT),
}

# --- Lookup ---

def _candidates(token: str) -> list[str]:
    raw = token.strip()
    trimmed = raw.rstrip(".") or raw
    keys = []
    # Single letters keep their case first: "T" is a tablespoon, "t" a teaspoon
    for key in (raw, trimmed):
        if len(key) == 1 and key not in keys:
            keys.append(key)
    for key in (raw.lower(), trimmed.lower()):
        if key not in keys:
            keys.append(key)
    return keys


def lookup_unit(token: str, system: str) -> Optional[UnitInfo]:
    """Find a volume or weight unit of the given system. None if unrecognized."""
    if not token or system not in _TABLES:
        return None

    for key in _candidates(token):
        for table in _TABLES[system]:
            if key in table:
                return table[key]
    return None


def normalize_temperature_token(token: str) -> str:
    return "".join(ch for ch in token.lower() if ch not in "°." and not ch.isspace())


def temperature_scale(token: str) -> Optional[str]:
    """Return "f" or "c" for a temperature token, None otherwise."""
    if not token:
        return None
    norm = normalize_temperature_token(token)
    if norm in FAHRENHEIT_TOKENS:
        return "f"
    if norm in CELSIUS_TOKENS:
        return "c"
    return None


def classify_unit(token: str, system: str) -> UnitClass:
    info = lookup_unit(token, system)
    if info is not None:
        return info.unit_class
    scale = temperature_scale(token)
    if (scale == "f" and system == "us") or (scale == "c" and system == "metric"):
        return UnitClass.TEMPERATURE
    return UnitClass.UNRECOGNIZED
