"""Named formula constants and the tunable projection policy.

All numeric policy of the engine lives here so it can be tuned and tested
independently of the calculators. ``ProjectionPolicy`` groups the values a
deployment may override (see ``infrastructure.config``); the activity
tables and the body-fat floor are fixed.
"""

from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Mapping

from .value_objects.activity_level import ActivityLevel

# Energy stored in 1 kg of adipose tissue
KCAL_PER_KG = 7700.0

# Projected body fat never reported below this
BODY_FAT_FLOOR_PERCENT = 5.0
BODY_FAT_CEILING_PERCENT = 100.0

# TDEE weighting table
TDEE_ACTIVITY_MULTIPLIERS: Mapping[ActivityLevel, float] = MappingProxyType(
    {
        ActivityLevel.SEDENTARY: 1.2,
        ActivityLevel.LIGHTLY_ACTIVE: 1.375,
        ActivityLevel.MODERATELY_ACTIVE: 1.5,
        ActivityLevel.ACTIVE: 1.7,
        ActivityLevel.VERY_ACTIVE: 1.9,
    }
)

# Baseline table for the minimum-calorie floor. Differs from the TDEE table
# at every tier above lightly active; kept separate on purpose.
FLOOR_ACTIVITY_MULTIPLIERS: Mapping[ActivityLevel, float] = MappingProxyType(
    {
        ActivityLevel.SEDENTARY: 1.2,
        ActivityLevel.LIGHTLY_ACTIVE: 1.375,
        ActivityLevel.MODERATELY_ACTIVE: 1.55,
        ActivityLevel.ACTIVE: 1.725,
        ActivityLevel.VERY_ACTIVE: 1.9,
    }
)

# (weekly loss upper bound kg, fraction of loss that is fat)
FAT_LOSS_RATIO_TIERS = (
    (0.5, 0.85),
    (0.75, 0.80),
    (1.0, 0.75),
)
FAT_LOSS_RATIO_FLOOR = 0.70


@dataclass(frozen=True)
class ProjectionPolicy:
    """Tunable safety and heuristic constants.

    Attributes:
        kcal_per_kg: Energy per kg of body weight change
        max_deficit_fraction: Deficit cap as a fraction of TDEE
        max_deficit_kcal: Absolute deficit cap (kcal/day)
        floor_factor: Multiplier applied to the BMR-equivalent floor
        male_safe_deficit_fraction: Recommended deficit fraction (male)
        male_safe_deficit_kcal: Recommended deficit cap (male)
        female_safe_deficit_fraction: Recommended deficit fraction (female)
        female_safe_deficit_kcal: Recommended deficit cap (female)
        rapid_loss_kg_per_week: Weekly loss above which RAPID_LOSS is raised
        aggressive_deficit_percent: Deficit % of TDEE above which
            AGGRESSIVE_DEFICIT is raised
        rapid_gain_kg_per_week: Weekly gain above which RAPID_GAIN is raised
        slow_gain_muscle_ratio: Muscle share of gain at or below the
            rapid-gain pace
        fast_gain_muscle_ratio: Muscle share of gain above it
    """

    kcal_per_kg: float = KCAL_PER_KG
    max_deficit_fraction: float = 0.25
    max_deficit_kcal: float = 750.0
    floor_factor: float = 1.2
    male_safe_deficit_fraction: float = 0.22
    male_safe_deficit_kcal: float = 600.0
    female_safe_deficit_fraction: float = 0.37
    female_safe_deficit_kcal: float = 660.0
    rapid_loss_kg_per_week: float = 1.0
    aggressive_deficit_percent: float = 30.0
    rapid_gain_kg_per_week: float = 0.5
    slow_gain_muscle_ratio: float = 0.75
    fast_gain_muscle_ratio: float = 0.5

    def __post_init__(self) -> None:
        # Import here to avoid circular dependency
        from .exceptions.domain_errors import InvalidPolicyError

        for f in fields(self):
            value = getattr(self, f.name)
            if value <= 0:
                raise InvalidPolicyError(f"{f.name} must be positive, got {value}")
        for name in (
            "max_deficit_fraction",
            "male_safe_deficit_fraction",
            "female_safe_deficit_fraction",
            "slow_gain_muscle_ratio",
            "fast_gain_muscle_ratio",
        ):
            value = getattr(self, name)
            if value > 1:
                raise InvalidPolicyError(f"{name} must be at most 1, got {value}")


DEFAULT_POLICY = ProjectionPolicy()


def fat_loss_ratio(weekly_loss_kg: float) -> float:
    """Fraction of lost weight attributed to fat for a weekly loss pace.

    Example:
        >>> fat_loss_ratio(0.5)
        0.85
        >>> fat_loss_ratio(1.2)
        0.7
    """
    for upper_bound, ratio in FAT_LOSS_RATIO_TIERS:
        if weekly_loss_kg <= upper_bound:
            return ratio
    return FAT_LOSS_RATIO_FLOOR
