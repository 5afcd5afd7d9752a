"""Shared test fixtures."""

import logging

import pytest

from nutrition_calculator.config import FormulaConstants, Settings
from nutrition_calculator.domain.patients import PatientParameters, Sex
from nutrition_calculator.services.calculator import NutritionCalculator


@pytest.fixture
def settings() -> Settings:
    return Settings(log_level="WARNING")


@pytest.fixture
def constants() -> FormulaConstants:
    return FormulaConstants()


@pytest.fixture
def calculator(constants: FormulaConstants) -> NutritionCalculator:
    return NutritionCalculator(constants=constants)


@pytest.fixture
def male_patient() -> PatientParameters:
    return PatientParameters(
        weight_kg=70,
        height_cm=175,
        sex=Sex.MALE,
        age_years=30,
        activity_factor=1.2,
    )


@pytest.fixture
def female_patient() -> PatientParameters:
    return PatientParameters(
        weight_kg=60,
        height_cm=165,
        sex=Sex.FEMALE,
        age_years=40,
        activity_factor=1.4,
    )


@pytest.fixture
def captured_package_logs(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> pytest.LogCaptureFixture:
    """Route package log records to ``caplog`` at INFO and above."""
    monkeypatch.setattr(logging.getLogger("nutrition_calculator"), "propagate", True)
    caplog.set_level(logging.INFO, logger="nutrition_calculator.services.calculator")
    return caplog
