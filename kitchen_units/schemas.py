"""Pydantic schemas for the kitchen-units API.

Request/response models for:
- Unit conversion and detection
- Amount scaling
- Recipe ingredient adjustment and scaling plans
"""

from typing import Optional, Literal

from pydantic import BaseModel, ConfigDict, Field


UnitSystemName = Literal["us", "metric"]
IngredientCategory = Literal["protein", "vegetable", "grain", "dairy", "spice", "other"]


# --- Units ---

class UnitConvertRequest(BaseModel):
    amount: str
    from_system: Optional[UnitSystemName] = None  # detected from the amount when omitted
    to_system: UnitSystemName


class UnitConvertResponse(BaseModel):
    amount: str
    converted: str
    from_system: Optional[UnitSystemName]
    to_system: UnitSystemName
    changed: bool


class UnitScaleRequest(BaseModel):
    amount: str
    multiplier: float = Field(..., gt=0)


class UnitScaleResponse(BaseModel):
    amount: str
    scaled: str
    value: Optional[float] = None  # None when the amount has no readable number


class UnitDetectRequest(BaseModel):
    amount: str


class UnitDetectResponse(BaseModel):
    amount: str
    unit: str
    has_us_units: bool
    has_metric_units: bool
    system: Optional[UnitSystemName] = None


# --- Recipe Ingredients ---

class IngredientIn(BaseModel):
    model_config = ConfigDict(extra="allow")

    item: str
    amount: str
    category: IngredientCategory = "other"
    section: Optional[str] = None


class RecipeAdjustRequest(BaseModel):
    ingredients: list[IngredientIn]
    multiplier: float = Field(1.0, gt=0)
    unit_system: Optional[UnitSystemName] = None  # falls back to settings.default_unit_system


class RecipeAdjustResponse(BaseModel):
    ingredients: list[dict]
    multiplier: float
    unit_system: UnitSystemName


# --- Scaling Plan ---

class ScalingPreferences(BaseModel):
    round_to_nice_numbers: bool = True
    adjust_cooking_times: bool = True
    provide_tips: bool = True


class ScaleRecipeRequest(BaseModel):
    recipe_name: Optional[str] = None
    original_servings: int = Field(..., ge=1)
    target_servings: int = Field(..., ge=1, le=50)
    prep_time: Optional[int] = Field(None, ge=0)
    cook_time: Optional[int] = Field(None, ge=0)
    preferences: ScalingPreferences = Field(default_factory=ScalingPreferences)


class TimeAdjustment(BaseModel):
    original: int
    adjusted: int
    delta: int
    display: str


class ScalingAdjustments(BaseModel):
    time_changes: bool
    equipment_changes: bool
    batch_cooking_recommended: bool


class ScalingPlan(BaseModel):
    recipe_name: Optional[str] = None
    scale_factor: float
    original_servings: int
    target_servings: int
    prep: Optional[TimeAdjustment] = None
    cook: Optional[TimeAdjustment] = None
    tips: list[str] = Field(default_factory=list)
    equipment_notes: list[str] = Field(default_factory=list)
    adjustments: ScalingAdjustments
    message: str
