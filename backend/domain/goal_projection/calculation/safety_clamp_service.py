"""SafetyClampService - bounds raw targets to physiologically sound limits."""

import logging
import math

from ..core.policy import (
    DEFAULT_POLICY,
    FLOOR_ACTIVITY_MULTIPLIERS,
    ProjectionPolicy,
)
from ..core.ports.calculators import ISafetyClamp
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.goal_direction import GoalDirection
from ..core.value_objects.goal_plan import GoalPlan, StrategyOutcome
from ..core.value_objects.tdee import TDEE

logger = logging.getLogger(__name__)


class SafetyClampService(ISafetyClamp):
    """Enforce the minimum-calorie floor and the deficit cap.

    Contract: the returned target is never below the floor and, on the
    loss branch, never implies a deficit above the cap. Reported percent
    and weekly rate are recomputed from the final integer target.

    Limits:
        floor       = TDEE / 1.55 × 1.2 (BMR-equivalent at moderate activity)
        max deficit = min(TDEE × 0.25, 750) kcal/day
    """

    def __init__(self, policy: ProjectionPolicy = DEFAULT_POLICY):
        self._policy = policy

    def min_calories_floor(self, tdee: TDEE) -> float:
        """Absolute physiological minimum for a TDEE.

        Example:
            >>> round(SafetyClampService().min_calories_floor(TDEE(2670.0)), 2)
            2067.1
        """
        baseline = FLOOR_ACTIVITY_MULTIPLIERS[ActivityLevel.MODERATELY_ACTIVE]
        return tdee.value / baseline * self._policy.floor_factor

    def max_deficit(self, tdee: TDEE) -> float:
        p = self._policy
        return min(tdee.value * p.max_deficit_fraction, p.max_deficit_kcal)

    def apply(self, outcome: StrategyOutcome, tdee: TDEE) -> GoalPlan:
        floor = self.min_calories_floor(tdee)
        raw = outcome.raw_target_calories

        if outcome.direction is GoalDirection.LOSS:
            cap = self.max_deficit(tdee)
            lower_bound = max(floor, tdee.value - cap)
            if tdee.value - raw > cap:
                final = lower_bound
            else:
                final = max(floor, raw)
        elif outcome.direction is GoalDirection.GAIN:
            lower_bound = floor
            final = max(floor, raw)
        else:
            lower_bound = floor
            final = tdee.value

        target = int(round(final))
        if target < lower_bound:
            target = math.ceil(lower_bound)

        was_clamped = final != raw
        if was_clamped:
            logger.info(
                "Calorie target clamped",
                extra={
                    "raw_target_calories": round(raw, 1),
                    "target_calories": target,
                    "min_calories_floor": round(floor, 1),
                },
            )

        if outcome.direction is GoalDirection.HOLD:
            percent = 0.0
            weekly_rate = 0.0
        else:
            adjustment = target - tdee.value
            percent = adjustment / tdee.value * 100
            weekly_rate = adjustment * 7 / self._policy.kcal_per_kg

        return GoalPlan(
            target_calories=target,
            deficit_or_surplus_percent=percent,
            weekly_rate_kg=weekly_rate,
            projected_body_fat_percent=outcome.projected_body_fat_percent,
            warnings=outcome.warnings,
            direction=outcome.direction,
            raw_target_calories=raw,
            min_calories_floor=floor,
            recommended_deficit_kcal=outcome.recommended_deficit_kcal,
            was_clamped=was_clamped,
            expected_fat_change_kg=outcome.expected_fat_change_kg,
            expected_lean_change_kg=outcome.expected_lean_change_kg,
        )
