"""Clinical nutrition calculator."""

import logging
import math
from dataclasses import dataclass, field

from nutrition_calculator.config import FormulaConstants
from nutrition_calculator.domain.errors import InvalidInput
from nutrition_calculator.domain.patients import PatientParameters, Sex
from nutrition_calculator.domain.policies import (
    PoundRounding,
    ShortStatureStrategy,
    round_pounds,
    short_stature_ibw_lbs,
)
from nutrition_calculator.domain.results import (
    FrameSize,
    Macronutrients,
    NutritionResult,
)

_logger = logging.getLogger(__name__)


@dataclass
class NutritionCalculator:
    """Computes nutrition metrics from patient parameters.

    Every method is a pure function of its arguments and the injected
    constants; instances hold no per-patient state.
    """

    constants: FormulaConstants = field(default_factory=FormulaConstants)
    short_stature_strategy: ShortStatureStrategy = (
        ShortStatureStrategy.LEGACY_REDUCTION
    )
    pound_rounding: PoundRounding = PoundRounding.FLOOR
    debug: bool = False

    def compute_bmi(self, params: PatientParameters) -> float:
        """Return body mass index in kg/m²."""
        _validate(params)
        height_m = params.height_cm / 100
        height_m2 = height_m * height_m
        if height_m2 == 0:
            _reject("height_cm", params.height_cm, "large enough to square")
        bmi = params.weight_kg / height_m2
        if not math.isfinite(bmi):
            weight_dominates = math.log(params.weight_kg) > -math.log(height_m2)
            source = "weight_kg" if weight_dominates else "height_cm"
            _reject_overflow(source, getattr(params, source))
        return bmi

    def classify_frame_size(self, params: PatientParameters) -> FrameSize | None:
        """Classify body frame from the height-to-wrist ratio, if measured."""
        _validate(params)
        if params.wrist_cm is None:
            return None
        c = self.constants
        ratio = params.height_cm / params.wrist_cm
        if params.sex is Sex.MALE:
            small, large = c.frame_small_ratio_male, c.frame_large_ratio_male
        else:
            small, large = c.frame_small_ratio_female, c.frame_large_ratio_female
        if ratio > small:
            return FrameSize.SMALL
        if ratio < large:
            return FrameSize.LARGE
        return FrameSize.MEDIUM

    def compute_ibw(self, params: PatientParameters) -> float:
        """Return ideal body weight in kg using the Hamwi method."""
        _validate(params)
        c = self.constants
        height_in = params.height_cm / c.cm_per_inch
        if params.sex is Sex.MALE:
            base_lbs = c.ibw_base_weight_male_lbs
            increment = c.ibw_increment_male_lbs_per_inch
        else:
            base_lbs = c.ibw_base_weight_female_lbs
            increment = c.ibw_increment_female_lbs_per_inch

        if height_in >= c.ibw_base_height_in:
            ibw_lbs = base_lbs + increment * (height_in - c.ibw_base_height_in)
        else:
            ibw_lbs = short_stature_ibw_lbs(
                self.short_stature_strategy,
                base_lbs=base_lbs,
                increment_lbs_per_inch=increment,
                inches_below_base=c.ibw_base_height_in - height_in,
                legacy_reduction_lbs_per_inch=c.ibw_legacy_reduction_lbs_per_inch,
            )

        frame = self.classify_frame_size(params)
        if frame is FrameSize.SMALL:
            ibw_lbs *= c.frame_small_factor
        elif frame is FrameSize.LARGE:
            ibw_lbs *= c.frame_large_factor

        if not math.isfinite(ibw_lbs):
            _reject_overflow("height_cm", params.height_cm)
        ibw_kg = round_pounds(self.pound_rounding, ibw_lbs) / c.lbs_per_kg
        if self.debug:
            _logger.info(
                "IBW: height_in=%.2f frame=%s ibw_lbs=%.2f ibw_kg=%.2f",
                height_in,
                frame.value if frame else "n/a",
                ibw_lbs,
                ibw_kg,
            )
        return max(ibw_kg, 0.0)

    def compute_adjusted_body_weight(self, params: PatientParameters) -> float:
        """Return adjusted body weight in kg.

        Below the obesity threshold the actual weight is returned unchanged.
        """
        c = self.constants
        ibw = self.compute_ibw(params)
        bmi = self.compute_bmi(params)
        if bmi > c.adjusted_bw_bmi_severe_threshold:
            factor = c.adjusted_bw_severe_factor
        elif bmi > c.adjusted_bw_bmi_threshold:
            factor = c.adjusted_bw_factor
        else:
            return params.weight_kg
        return max(ibw + (params.weight_kg - ibw) * factor, 0.0)

    def compute_bmr(self, params: PatientParameters) -> float:
        """Return basal metabolic rate in kcal/day (Mifflin-St Jeor)."""
        _validate(params)
        c = self.constants
        offset = c.bmr_male_offset if params.sex is Sex.MALE else c.bmr_female_offset
        terms = {
            "weight_kg": c.bmr_weight_factor * params.weight_kg,
            "height_cm": c.bmr_height_factor * params.height_cm,
            "age_years": c.bmr_age_factor * params.age_years,
        }
        bmr = terms["weight_kg"] + terms["height_cm"] - terms["age_years"] + offset
        if not math.isfinite(bmr):
            source = max(terms, key=lambda name: abs(terms[name]))
            _reject_overflow(source, getattr(params, source))
        if self.debug:
            _logger.info("BMR: sex=%s bmr=%.2f", params.sex.value, bmr)
        return max(bmr, 0.0)

    def compute_tee(self, params: PatientParameters) -> float:
        """Return total energy expenditure in kcal/day."""
        stress = 1.0 if params.stress_factor is None else params.stress_factor
        tee = self.compute_bmr(params) * params.activity_factor * stress
        if not math.isfinite(tee):
            if stress > params.activity_factor:
                _reject_overflow("stress_factor", stress)
            _reject_overflow("activity_factor", params.activity_factor)
        return max(tee, 0.0)

    def compute_macronutrients(self, total_calories: float) -> Macronutrients:
        """Split a calorie figure into macronutrient grams."""
        if not math.isfinite(total_calories):
            raise InvalidInput("total_calories", total_calories, "a finite number")
        if total_calories <= 0:
            return Macronutrients(carbohydrates_g=0.0, protein_g=0.0, fat_g=0.0)
        c = self.constants
        return Macronutrients(
            carbohydrates_g=total_calories
            * c.macro_carbohydrate_share
            / c.kcal_per_g_carbohydrate,
            protein_g=total_calories * c.macro_protein_share / c.kcal_per_g_protein,
            fat_g=total_calories * c.macro_fat_share / c.kcal_per_g_fat,
        )

    def compute_fluid_requirement(self, params: PatientParameters) -> float:
        """Return daily fluid requirement in mL."""
        _validate(params)
        fluids = params.weight_kg * self.constants.fluid_ml_per_kg
        if not math.isfinite(fluids):
            _reject_overflow("weight_kg", params.weight_kg)
        return max(fluids, 0.0)

    def calculate(
        self, params: PatientParameters, calorie_target: float | None = None
    ) -> NutritionResult:
        """Compute every metric.

        Macronutrients are distributed from ``calorie_target`` when given,
        otherwise from TEE.
        """
        tee = self.compute_tee(params)
        basis = tee if calorie_target is None else calorie_target
        result = NutritionResult(
            bmi=self.compute_bmi(params),
            ibw_kg=self.compute_ibw(params),
            adjusted_body_weight_kg=self.compute_adjusted_body_weight(params),
            bmr_kcal=self.compute_bmr(params),
            tee_kcal=tee,
            macronutrients=self.compute_macronutrients(basis),
            fluid_requirement_ml=self.compute_fluid_requirement(params),
            calorie_basis_kcal=max(basis, 0.0),
            frame_size=self.classify_frame_size(params),
        )
        if self.debug:
            _logger.info(
                "Nutrition result: bmi=%.1f ibw=%.1f tee=%.0f basis=%.0f",
                result.bmi,
                result.ibw_kg,
                result.tee_kcal,
                result.calorie_basis_kcal,
            )
        return result


def _validate(params: PatientParameters) -> None:
    """Reject non-finite or out-of-range measurements."""
    if not isinstance(params.sex, Sex):
        _reject("sex", params.sex, "a Sex member")
    _require("weight_kg", params.weight_kg, allow_zero=False)
    _require("height_cm", params.height_cm, allow_zero=False)
    _require("age_years", params.age_years, allow_zero=True)
    _require("activity_factor", params.activity_factor, allow_zero=False)
    if params.wrist_cm is not None:
        _require("wrist_cm", params.wrist_cm, allow_zero=False)
    if params.stress_factor is not None:
        _require("stress_factor", params.stress_factor, allow_zero=False)


def _require(name: str, value: float, *, allow_zero: bool) -> None:
    requirement = "a finite number >= 0" if allow_zero else "a finite number > 0"
    valid = math.isfinite(value) and (value >= 0 if allow_zero else value > 0)
    if not valid:
        _reject(name, value, requirement)


def _reject_overflow(name: str, value: float) -> None:
    _reject(name, value, "small enough to give a finite result")


def _reject(name: str, value: object, requirement: str) -> None:
    _logger.warning("Rejected patient parameter %s=%r", name, value)
    raise InvalidInput(name, value, requirement)
