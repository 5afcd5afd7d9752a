"""Selectable policies for the Hamwi ideal body weight estimate."""

import math
from enum import Enum


class ShortStatureStrategy(Enum):
    """How IBW is extrapolated for heights under the Hamwi base height.

    Hamwi is only defined from 60 inches upwards. ``LEGACY_REDUCTION`` keeps
    the historical output of subtracting a flat number of pounds per missing
    inch; it is a non-standard extrapolation, not a validated clinical formula.
    """

    LEGACY_REDUCTION = "legacy_reduction"
    PER_INCH_REDUCTION = "per_inch_reduction"
    BASE_WEIGHT = "base_weight"


class PoundRounding(Enum):
    """Rounding applied to IBW in pounds before converting to kilograms.

    ``FLOOR`` matches historical output and underestimates by up to one pound.
    """

    FLOOR = "floor"
    NEAREST = "nearest"
    NONE = "none"


def short_stature_ibw_lbs(
    strategy: ShortStatureStrategy,
    *,
    base_lbs: float,
    increment_lbs_per_inch: float,
    inches_below_base: float,
    legacy_reduction_lbs_per_inch: float,
) -> float:
    """Return IBW in pounds for a height below the base height."""
    if strategy is ShortStatureStrategy.LEGACY_REDUCTION:
        reduced = base_lbs - legacy_reduction_lbs_per_inch * inches_below_base
    elif strategy is ShortStatureStrategy.PER_INCH_REDUCTION:
        reduced = base_lbs - increment_lbs_per_inch * inches_below_base
    else:
        reduced = base_lbs
    return max(reduced, 0.0)


def round_pounds(policy: PoundRounding, pounds: float) -> float:
    """Apply a pound rounding policy."""
    if policy is PoundRounding.FLOOR:
        return float(math.floor(pounds))
    if policy is PoundRounding.NEAREST:
        return float(math.floor(pounds + 0.5))
    return pounds
