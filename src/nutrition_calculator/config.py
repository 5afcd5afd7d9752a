"""Application configuration."""

import logging
import os

from pydantic import NonNegativeFloat, PositiveFloat, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nutrition_calculator.domain.policies import PoundRounding, ShortStatureStrategy

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")
_ENV_FILES = (f".env.{_ENVIRONMENT}", ".env")


class FormulaConstants(BaseSettings):
    """Formula constants, overridable via ``NUTRITION_*`` environment variables."""

    # Unit conversion
    cm_per_inch: PositiveFloat = 2.54
    lbs_per_kg: PositiveFloat = 2.20462

    # IBW (Hamwi)
    ibw_base_height_in: PositiveFloat = 60
    ibw_base_weight_male_lbs: PositiveFloat = 106
    ibw_base_weight_female_lbs: PositiveFloat = 100
    ibw_increment_male_lbs_per_inch: PositiveFloat = 6
    ibw_increment_female_lbs_per_inch: PositiveFloat = 5
    ibw_legacy_reduction_lbs_per_inch: NonNegativeFloat = 2

    # Frame size (height cm / wrist cm)
    frame_small_ratio_male: PositiveFloat = 10.4
    frame_large_ratio_male: PositiveFloat = 9.6
    frame_small_ratio_female: PositiveFloat = 11
    frame_large_ratio_female: PositiveFloat = 10.1
    frame_small_factor: PositiveFloat = 0.9
    frame_large_factor: PositiveFloat = 1.1

    # Adjusted body weight
    adjusted_bw_bmi_threshold: PositiveFloat = 30
    adjusted_bw_bmi_severe_threshold: PositiveFloat = 40
    adjusted_bw_factor: NonNegativeFloat = 0.25
    adjusted_bw_severe_factor: NonNegativeFloat = 0.5

    # BMR (Mifflin-St Jeor)
    bmr_weight_factor: float = 10
    bmr_height_factor: float = 6.25
    bmr_age_factor: float = 5
    bmr_male_offset: float = 5
    bmr_female_offset: float = -161

    # Macronutrient split
    macro_carbohydrate_share: NonNegativeFloat = 0.5
    macro_protein_share: NonNegativeFloat = 0.2
    macro_fat_share: NonNegativeFloat = 0.3
    kcal_per_g_carbohydrate: PositiveFloat = 4
    kcal_per_g_protein: PositiveFloat = 4
    kcal_per_g_fat: PositiveFloat = 9

    # Fluids
    fluid_ml_per_kg: NonNegativeFloat = 30

    model_config = SettingsConfigDict(
        env_prefix="NUTRITION_",
        env_file=_ENV_FILES,
        extra="ignore",
        frozen=True,
    )

    @model_validator(mode="after")
    def check_bands(self) -> "FormulaConstants":
        if self.frame_large_ratio_male >= self.frame_small_ratio_male:
            raise ValueError("male frame ratios overlap")
        if self.frame_large_ratio_female >= self.frame_small_ratio_female:
            raise ValueError("female frame ratios overlap")
        if self.adjusted_bw_bmi_threshold >= self.adjusted_bw_bmi_severe_threshold:
            raise ValueError("adjusted body weight BMI thresholds out of order")
        return self


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    log_level: str = "INFO"
    debug: bool = False
    short_stature_strategy: ShortStatureStrategy = (
        ShortStatureStrategy.LEGACY_REDUCTION
    )
    pound_rounding: PoundRounding = PoundRounding.FLOOR
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=_ENV_FILES,
        extra="ignore",
    )


def parse_log_level(raw: str | None) -> int:
    """Parse a log level name or number, falling back to INFO."""
    if raw is None:
        return logging.INFO
    cleaned = raw.strip().upper()
    if not cleaned:
        return logging.INFO
    if cleaned.isdigit():
        return int(cleaned)
    level = logging.getLevelName(cleaned)
    if isinstance(level, int):
        return level
    return logging.INFO
