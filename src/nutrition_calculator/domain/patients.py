"""Patient measurement models."""

from dataclasses import dataclass
from enum import Enum


class Sex(Enum):
    """Biological sex used to pick sex-specific formula constants."""

    MALE = "male"
    FEMALE = "female"


@dataclass(frozen=True)
class PatientParameters:
    """Measurements supplied once per calculation session.

    Optional measurements are absent when ``None``; a present ``0`` is a value
    and is rejected by the calculator rather than treated as missing.
    """

    weight_kg: float
    height_cm: float
    sex: Sex
    age_years: float
    activity_factor: float
    wrist_cm: float | None = None
    stress_factor: float | None = None
