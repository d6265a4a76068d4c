"""
Router for recipe-level scaling: per-ingredient adjustment and scaling plans.
"""

from fastapi import APIRouter, HTTPException

from ..schemas import (
    RecipeAdjustRequest,
    RecipeAdjustResponse,
    ScaleRecipeRequest,
    ScalingPlan,
)
from ..services.scaling import adjust_ingredients, plan_scaling
from ..settings import settings

router = APIRouter()


@router.post("/adjust", response_model=RecipeAdjustResponse)
def adjust_recipe(req: RecipeAdjustRequest):
    """
    Scale every ingredient by the serving multiplier and render it
    in the requested unit system.
    """
    if not req.ingredients:
        raise HTTPException(status_code=400, detail="At least one ingredient is required")
    if req.multiplier > settings.max_multiplier:
        raise HTTPException(
            status_code=400,
            detail=f"Multiplier must not exceed {settings.max_multiplier:g}",
        )

    unit_system = req.unit_system or settings.default_unit_system
    rows = [ing.model_dump(exclude_none=True) for ing in req.ingredients]
    adjusted = adjust_ingredients(rows, req.multiplier, unit_system)

    return RecipeAdjustResponse(
        ingredients=adjusted,
        multiplier=req.multiplier,
        unit_system=unit_system,
    )


@router.post("/scale-plan", response_model=ScalingPlan)
def scale_plan(req: ScaleRecipeRequest):
    """
    Scale factor, adjusted times and tips for a new serving count.
    Servings bounds are enforced by ScaleRecipeRequest (422).
    """
    return plan_scaling(
        original_servings=req.original_servings,
        target_servings=req.target_servings,
        prep_time=req.prep_time,
        cook_time=req.cook_time,
        preferences=req.preferences,
        recipe_name=req.recipe_name,
    )
