"""Calculation result models."""

from dataclasses import dataclass
from enum import Enum


class FrameSize(Enum):
    """Body frame inferred from the height-to-wrist ratio."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass(frozen=True)
class Macronutrients:
    """Macronutrient targets in grams."""

    carbohydrates_g: float
    protein_g: float
    fat_g: float


@dataclass(frozen=True)
class NutritionResult:
    """All derived metrics for one set of patient parameters."""

    bmi: float
    ibw_kg: float
    adjusted_body_weight_kg: float
    bmr_kcal: float
    tee_kcal: float
    macronutrients: Macronutrients
    fluid_requirement_ml: float
    calorie_basis_kcal: float
    frame_size: FrameSize | None = None
