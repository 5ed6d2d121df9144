"""GoalPlan value objects - raw strategy output and final clamped plan."""

from dataclasses import dataclass
from typing import Optional, Tuple

from .goal_direction import GoalDirection
from .warning_kind import WarningKind


@dataclass(frozen=True)
class StrategyOutcome:
    """Unclamped result of the goal strategy.

    Attributes:
        direction: Branch taken (loss/gain/hold)
        raw_target_calories: TDEE adjusted by the requested deficit/surplus
        daily_adjustment_kcal: Signed daily change requested (negative = deficit)
        requested_weekly_rate_kg: Signed weekly rate implied by the request
        projected_body_fat_percent: Projected body fat at goal weight
        expected_fat_change_kg: Signed change in fat mass at goal weight
        expected_lean_change_kg: Signed change in lean mass at goal weight
        recommended_deficit_kcal: Sex-specific safe deficit (loss only)
        warnings: Advisory warnings raised by the request
    """

    direction: GoalDirection
    raw_target_calories: float
    daily_adjustment_kcal: float
    requested_weekly_rate_kg: float
    projected_body_fat_percent: float
    expected_fat_change_kg: float = 0.0
    expected_lean_change_kg: float = 0.0
    recommended_deficit_kcal: Optional[float] = None
    warnings: Tuple[WarningKind, ...] = ()


@dataclass(frozen=True)
class GoalPlan:
    """Final calorie plan after the safety clamp.

    ``deficit_or_surplus_percent`` and ``weekly_rate_kg`` are recomputed
    from ``target_calories``, so every reported figure agrees with the
    target the user is asked to eat.

    Attributes:
        target_calories: Daily calorie target (never below the floor)
        deficit_or_surplus_percent: Signed % of TDEE (negative = deficit)
        weekly_rate_kg: Signed weekly weight change (negative = loss)
        projected_body_fat_percent: Projected body fat at goal weight
        warnings: Ordered advisory warnings
        direction: Branch taken
        raw_target_calories: Target before clamping
        min_calories_floor: Absolute calorie floor applied
        recommended_deficit_kcal: Sex-specific safe deficit (loss only)
        was_clamped: True if the clamp changed the raw target
        expected_fat_change_kg: Signed change in fat mass at goal weight
        expected_lean_change_kg: Signed change in lean mass at goal weight
    """

    target_calories: int
    deficit_or_surplus_percent: float
    weekly_rate_kg: float
    projected_body_fat_percent: float
    warnings: Tuple[WarningKind, ...]
    direction: GoalDirection
    raw_target_calories: float
    min_calories_floor: float
    recommended_deficit_kcal: Optional[float] = None
    was_clamped: bool = False
    expected_fat_change_kg: float = 0.0
    expected_lean_change_kg: float = 0.0

    def __post_init__(self) -> None:
        # Import here to avoid circular dependency
        from ..policy import BODY_FAT_FLOOR_PERCENT

        if self.target_calories < self.min_calories_floor:
            raise ValueError(
                f"Target {self.target_calories} kcal is below the floor "
                f"{self.min_calories_floor:.1f} kcal"
            )
        if self.projected_body_fat_percent < BODY_FAT_FLOOR_PERCENT:
            raise ValueError(
                f"Projected body fat must be at least {BODY_FAT_FLOOR_PERCENT}%, got "
                f"{self.projected_body_fat_percent}"
            )

