"""Quantity parsing, unit conversion and serving scaling for recipe amounts."""

from .parsing.quantity import parse_number
from .services.formatting import format_number, format_minutes
from .services.unit_conversion import (
    convert_amount,
    contains_us_units,
    contains_metric_units,
)
from .services.scaling import (
    scale_number,
    format_scaled_number,
    scale_ingredient_amount,
    adjust_ingredients,
    plan_scaling,
)

__version__ = "0.1.0"

__all__ = [
    "parse_number",
    "format_number",
    "format_minutes",
    "convert_amount",
    "contains_us_units",
    "contains_metric_units",
    "scale_number",
    "format_scaled_number",
    "scale_ingredient_amount",
    "adjust_ingredients",
    "plan_scaling",
]
