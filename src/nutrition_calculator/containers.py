"""Dependency container wiring for the calculator."""

from dataclasses import dataclass

from nutrition_calculator.app_logging import configure_logging
from nutrition_calculator.config import FormulaConstants, Settings
from nutrition_calculator.services.calculator import NutritionCalculator


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    constants: FormulaConstants
    calculator: NutritionCalculator


def build_container(
    settings: Settings | None = None, constants: FormulaConstants | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_constants = constants or FormulaConstants()
    configure_logging(resolved_settings.log_level)
    calculator = NutritionCalculator(
        constants=resolved_constants,
        short_stature_strategy=resolved_settings.short_stature_strategy,
        pound_rounding=resolved_settings.pound_rounding,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        constants=resolved_constants,
        calculator=calculator,
    )
