"""
Router for unit conversion utilities.
"""

from fastapi import APIRouter, HTTPException

from ..parsing.quantity import extract_unit, split_amount
from ..schemas import (
    UnitConvertRequest,
    UnitConvertResponse,
    UnitDetectRequest,
    UnitDetectResponse,
    UnitScaleRequest,
    UnitScaleResponse,
)
from ..services.scaling import scale_ingredient_amount, scale_number
from ..services.unit_conversion import (
    contains_metric_units,
    contains_us_units,
    convert_amount,
    detect_system,
)
from ..settings import settings

router = APIRouter()


@router.post("/convert", response_model=UnitConvertResponse)
def convert_units(req: UnitConvertRequest):
    """
    Convert an amount string into the target unit system.
    The source system is detected from the amount unless given.
    """
    from_system = req.from_system or detect_system(req.amount)

    converted = req.amount
    if from_system:
        converted = convert_amount(req.amount, from_system, req.to_system)

    return UnitConvertResponse(
        amount=req.amount,
        converted=converted,
        from_system=from_system,
        to_system=req.to_system,
        changed=converted != req.amount,
    )


@router.post("/scale", response_model=UnitScaleResponse)
def scale_amount(req: UnitScaleRequest):
    """Scale the leading quantity of an amount by a serving multiplier."""
    if req.multiplier > settings.max_multiplier:
        raise HTTPException(
            status_code=400,
            detail=f"Multiplier must not exceed {settings.max_multiplier:g}",
        )

    value = None
    parts = split_amount(req.amount)
    if parts is not None:
        value = scale_number(parts[0], req.multiplier)

    return UnitScaleResponse(
        amount=req.amount,
        scaled=scale_ingredient_amount(req.amount, req.multiplier),
        value=value,
    )


@router.post("/detect", response_model=UnitDetectResponse)
def detect_units(req: UnitDetectRequest):
    """Report which unit system an amount is written in."""
    return UnitDetectResponse(
        amount=req.amount,
        unit=extract_unit(req.amount),
        has_us_units=contains_us_units(req.amount),
        has_metric_units=contains_metric_units(req.amount),
        system=detect_system(req.amount),
    )
