"""Errors raised by the nutrition calculator."""


class NutritionCalculatorError(Exception):
    """Base class for calculator errors."""


class InvalidInput(NutritionCalculatorError, ValueError):  # noqa: N818
    """Raised when a measurement violates its numeric constraint."""

    def __init__(self, field: str, value: object, requirement: str) -> None:
        self.field = field
        self.value = value
        self.requirement = requirement
        super().__init__(f"{field} must be {requirement}, got {value!r}")
