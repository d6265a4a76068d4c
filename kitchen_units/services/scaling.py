"""
Serving-size scaling for ingredient amounts and whole recipes.
"""

import logging
import math
from typing import Iterable, Mapping, Optional

from ..parsing.quantity import parse_number, split_amount
from ..schemas import (
    ScalingAdjustments,
    ScalingPlan,
    ScalingPreferences,
    TimeAdjustment,
)
from .formatting import format_minutes, format_number
from .unit_conversion import contains_metric_units, contains_us_units, convert_amount

logger = logging.getLogger(__name__)

MAX_TARGET_SERVINGS = 50


def scale_number(text: str, multiplier: float) -> Optional[float]:
    """Parse a quantity literal and multiply it. None if it can't be parsed."""
    value = parse_number(text)
    if value is None:
        return None
    return value * multiplier


def format_scaled_number(value: float) -> str:
    return format_number(value)


def scale_ingredient_amount(amount: str, multiplier: float) -> str:
    """
    Scale the leading number of an amount, keeping the rest of the text.
    "1 1/2 cups flour" x2 -> "3 cups flour". Unreadable amounts are returned as is.
    """
    if not amount or multiplier == 1:
        return amount

    parts = split_amount(amount)
    if parts is None:
        return amount

    num_part, rest = parts
    scaled = scale_number(num_part, multiplier)
    if scaled is None:
        return amount

    formatted = format_scaled_number(scaled)
    return f"{formatted} {rest}" if rest else formatted


def adjust_ingredient(ingredient: Mapping, multiplier: float, unit_system: str) -> dict:
    """Scale one ingredient row, then convert it into unit_system if it is written in the other one."""
    amount = scale_ingredient_amount(ingredient.get("amount", ""), multiplier)

    if unit_system == "metric" and contains_us_units(amount):
        amount = convert_amount(amount, "us", "metric")
    elif unit_system == "us" and contains_metric_units(amount):
        amount = convert_amount(amount, "metric", "us")

    return {**ingredient, "amount": amount}


def adjust_ingredients(
    ingredients: Iterable[Mapping],
    multiplier: float,
    unit_system: str,
) -> list[dict]:
    """
    Apply serving multiplier and unit system to every ingredient.
    A row that fails is logged and returned unchanged so one bad amount
    never takes the rest of the list down with it.
    """
    adjusted = []
    for ingredient in ingredients:
        try:
            adjusted.append(adjust_ingredient(ingredient, multiplier, unit_system))
        except Exception:
            logger.error(f"Error adjusting ingredient: {ingredient!r}", exc_info=True)
            adjusted.append(dict(ingredient))
    return adjusted


# --- Recipe scaling plan ---

def _ceil(value: float) -> int:
    # Strip float noise first: 20 * 1.1 is 22.000000000000004
    return math.ceil(round(value, 6))


def _time_adjustment(original: int, adjusted: int) -> TimeAdjustment:
    delta = adjusted - original
    sign = "+" if adjusted > original else ""
    return TimeAdjustment(
        original=original,
        adjusted=adjusted,
        delta=delta,
        display=f"{format_minutes(adjusted)} ({sign}{delta} min)",
    )


def _scaling_tips(scale_factor: float, up: bool, down: bool, major: bool) -> list[str]:
    tips = []
    if major:
        tips.append("Major scaling may require equipment changes (larger pots, multiple batches)")
    if up:
        tips.append("Taste and adjust seasonings gradually - they don't always scale linearly")
        tips.append("Consider cooking in batches if your equipment is too small")
    if down:
        tips.append("Small amounts can cook faster - watch timing carefully")
        tips.append("Some ingredients (like eggs) may be hard to scale down precisely")
    if scale_factor != round(scale_factor):
        tips.append("Use kitchen scale for accuracy with fractional measurements")
    return tips


def plan_scaling(
    original_servings: int,
    target_servings: int,
    prep_time: Optional[int] = None,
    cook_time: Optional[int] = None,
    preferences: Optional[ScalingPreferences] = None,
    recipe_name: Optional[str] = None,
) -> ScalingPlan:
    """
    Work out how a recipe changes when scaled to a new serving count.

    Returns the scale factor plus adjusted prep/cook times, tips and
    equipment notes. Raises ValueError for out-of-range servings.
    Adjusted times are rounded up after dropping float noise, so 20 min
    scaled by 1.1 is 22, not 23.
    """
    if original_servings < 1:
        raise ValueError("original_servings must be at least 1")
    if not 1 <= target_servings <= MAX_TARGET_SERVINGS:
        raise ValueError(f"target_servings must be between 1 and {MAX_TARGET_SERVINGS}")

    prefs = preferences or ScalingPreferences()
    scale_factor = target_servings / original_servings
    up = scale_factor > 1
    down = scale_factor < 1
    major = scale_factor > 2 or scale_factor < 0.5

    prep = cook = None
    if prefs.adjust_cooking_times and prep_time is not None and cook_time is not None:
        new_prep = _ceil(prep_time * 1.1) if up else prep_time
        if major:
            new_cook = _ceil(cook_time * 1.15) if up else _ceil(cook_time * 0.9)
        else:
            new_cook = cook_time
        prep = _time_adjustment(prep_time, new_prep)
        cook = _time_adjustment(cook_time, new_cook)

    tips = _scaling_tips(scale_factor, up, down, major) if prefs.provide_tips else []

    equipment_notes = []
    if major:
        equipment_notes = [
            f"{'Larger' if up else 'Smaller'} pots, pans, and mixing bowls may be needed",
            "Consider batch cooking if equipment is limiting" if up else "Smaller equipment may cook faster",
        ]

    name = recipe_name or "Recipe"
    lines = [
        "📏 **Scaling Complete!**",
        "",
        f'"{name}" scaled from {original_servings} to {target_servings} servings',
        f"🔢 **Scale Factor:** {scale_factor:.2f}x",
        "",
        "📝 **Instructions:**",
        f"• Multiply all ingredient amounts by **{scale_factor:.2f}**",
    ]
    if prefs.round_to_nice_numbers:
        lines.append("• Round to convenient measurements (1.3 cups → 1⅓ cups)")
    if prep and cook:
        lines += ["⏱️ **Adjusted Times:**", f"• Prep: {prep.display}", f"• Cook: {cook.display}"]
    if tips:
        lines += ["💡 **Scaling Tips:**"] + [f"• {tip}" for tip in tips]
    if equipment_notes:
        lines += ["🔧 **Equipment Notes:**"] + [f"• {note}" for note in equipment_notes]

    logger.info(f"Scaling plan for {name!r}: {original_servings} -> {target_servings} ({scale_factor:.2f}x)")

    return ScalingPlan(
        recipe_name=recipe_name,
        scale_factor=scale_factor,
        original_servings=original_servings,
        target_servings=target_servings,
        prep=prep,
        cook=cook,
        tips=tips,
        equipment_notes=equipment_notes,
        adjustments=ScalingAdjustments(
            time_changes=prefs.adjust_cooking_times,
            equipment_changes=major,
            batch_cooking_recommended=up and major,
        ),
        message="\n".join(lines),
    )
