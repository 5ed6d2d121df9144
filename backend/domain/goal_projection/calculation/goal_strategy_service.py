"""GoalStrategyService - goal branching and raw energy adjustment."""

import logging
from dataclasses import replace
from typing import List, Tuple

from ..core.policy import (
    BODY_FAT_CEILING_PERCENT,
    BODY_FAT_FLOOR_PERCENT,
    DEFAULT_POLICY,
    ProjectionPolicy,
    fat_loss_ratio,
)
from ..core.ports.calculators import IGoalStrategy
from ..core.value_objects.body_composition import BodyComposition
from ..core.value_objects.goal import Goal
from ..core.value_objects.goal_direction import GoalDirection
from ..core.value_objects.goal_plan import StrategyOutcome
from ..core.value_objects.sex import Sex
from ..core.value_objects.tdee import TDEE
from ..core.value_objects.user_profile import UserProfile
from ..core.value_objects.warning_kind import WarningKind

logger = logging.getLogger(__name__)


def bound_body_fat(percent: float) -> float:
    """Clamp a projected body-fat percentage to the reportable range."""
    return min(max(percent, BODY_FAT_FLOOR_PERCENT), BODY_FAT_CEILING_PERCENT)


class GoalStrategyService(IGoalStrategy):
    """Select the goal branch and compute the unclamped calorie target.

    Branches:
        Loss: deficit = |Δ| × 7700 / days, fat share of the loss tiered
            by weekly pace (0.85 / 0.80 / 0.75 / 0.70).
        Gain: surplus = weekly gain × 7700 / 7, muscle share 0.75 at or
            below 0.5 kg/week, 0.5 above.
        Hold: eat at TDEE.

    Where Δ = goal weight - current weight. The output is raw: bounding it
    to safe limits is the job of ``SafetyClampService``.
    """

    def __init__(self, policy: ProjectionPolicy = DEFAULT_POLICY):
        self._policy = policy

    @staticmethod
    def select_direction(goal: Goal, weight_delta_kg: float) -> Tuple[GoalDirection, bool]:
        """Pick the branch for a goal and weight delta.

        Maintain always holds. A loss or gain goal follows the sign of the
        delta; the second element is True when the delta contradicts the
        stated goal.

        Example:
            >>> GoalStrategyService.select_direction(Goal.GAIN_WEIGHT, -3.0)
            (<GoalDirection.LOSS: 'loss'>, True)
        """
        if goal is Goal.MAINTAIN:
            return GoalDirection.HOLD, False

        if goal is Goal.LOSE_WEIGHT or goal is Goal.GAIN_WEIGHT:
            if weight_delta_kg < 0:
                direction = GoalDirection.LOSS
            elif weight_delta_kg > 0:
                direction = GoalDirection.GAIN
            else:
                direction = GoalDirection.HOLD
            mismatch = (goal is Goal.LOSE_WEIGHT and direction is GoalDirection.GAIN) or (
                goal is Goal.GAIN_WEIGHT and direction is GoalDirection.LOSS
            )
            return direction, mismatch

        raise ValueError(f"Unhandled goal: {goal!r}")

    def recommended_deficit(self, tdee: TDEE, sex: Sex) -> float:
        """Sex-specific safe deficit shown as a caution reference."""
        p = self._policy
        if sex is Sex.MALE:
            return min(tdee.value * p.male_safe_deficit_fraction, p.male_safe_deficit_kcal)
        return min(tdee.value * p.female_safe_deficit_fraction, p.female_safe_deficit_kcal)

    def plan(
        self,
        profile: UserProfile,
        tdee: TDEE,
        composition: BodyComposition,
    ) -> StrategyOutcome:
        direction, mismatch = self.select_direction(profile.goal, profile.weight_delta_kg)

        if direction is GoalDirection.LOSS:
            outcome = self._loss(profile, tdee, composition)
        elif direction is GoalDirection.GAIN:
            outcome = self._gain(profile, tdee, composition)
        else:
            outcome = self._hold(profile, tdee)

        if mismatch:
            logger.info(
                "Goal weight contradicts stated goal",
                extra={"goal": profile.goal.value, "direction": direction.value},
            )
            outcome = replace(
                outcome,
                warnings=outcome.warnings + (WarningKind.GOAL_DIRECTION_MISMATCH,),
            )

        logger.debug(
            "Strategy selected",
            extra={
                "direction": direction.value,
                "raw_target_calories": outcome.raw_target_calories,
                "requested_weekly_rate_kg": outcome.requested_weekly_rate_kg,
            },
        )
        return outcome

    def _loss(
        self,
        profile: UserProfile,
        tdee: TDEE,
        composition: BodyComposition,
    ) -> StrategyOutcome:
        p = self._policy
        total_loss_kg = abs(profile.weight_delta_kg)
        weekly_loss_kg = total_loss_kg / profile.weeks

        total_deficit_kcal = total_loss_kg * p.kcal_per_kg
        daily_deficit = total_deficit_kcal / profile.days_to_complete
        raw_target = tdee.value - daily_deficit

        ratio = fat_loss_ratio(weekly_loss_kg)
        expected_fat_loss_kg = total_loss_kg * ratio
        projected_fat_mass = composition.fat_mass_kg - expected_fat_loss_kg
        projected_body_fat = bound_body_fat(
            projected_fat_mass / profile.goal_weight_kg * 100
        )

        warnings: List[WarningKind] = []
        if weekly_loss_kg > p.rapid_loss_kg_per_week:
            warnings.append(WarningKind.RAPID_LOSS)
        if daily_deficit / tdee.value * 100 > p.aggressive_deficit_percent:
            warnings.append(WarningKind.AGGRESSIVE_DEFICIT)

        return StrategyOutcome(
            direction=GoalDirection.LOSS,
            raw_target_calories=raw_target,
            daily_adjustment_kcal=-daily_deficit,
            requested_weekly_rate_kg=-weekly_loss_kg,
            projected_body_fat_percent=projected_body_fat,
            expected_fat_change_kg=-expected_fat_loss_kg,
            expected_lean_change_kg=-(total_loss_kg - expected_fat_loss_kg),
            recommended_deficit_kcal=self.recommended_deficit(tdee, profile.sex),
            warnings=tuple(warnings),
        )

    def _gain(
        self,
        profile: UserProfile,
        tdee: TDEE,
        composition: BodyComposition,
    ) -> StrategyOutcome:
        p = self._policy
        weight_delta = profile.weight_delta_kg
        weekly_gain_kg = weight_delta / profile.weeks

        daily_surplus = weekly_gain_kg * p.kcal_per_kg / 7
        raw_target = tdee.value + daily_surplus

        if weekly_gain_kg <= p.rapid_gain_kg_per_week:
            muscle_ratio = p.slow_gain_muscle_ratio
        else:
            muscle_ratio = p.fast_gain_muscle_ratio
        expected_muscle_gain_kg = weight_delta * muscle_ratio
        expected_fat_gain_kg = weight_delta * (1 - muscle_ratio)

        projected_fat_mass = composition.fat_mass_kg + expected_fat_gain_kg
        projected_body_fat = bound_body_fat(
            projected_fat_mass / profile.goal_weight_kg * 100
        )

        warnings: Tuple[WarningKind, ...] = ()
        if weekly_gain_kg > p.rapid_gain_kg_per_week:
            warnings = (WarningKind.RAPID_GAIN,)

        return StrategyOutcome(
            direction=GoalDirection.GAIN,
            raw_target_calories=raw_target,
            daily_adjustment_kcal=daily_surplus,
            requested_weekly_rate_kg=weekly_gain_kg,
            projected_body_fat_percent=projected_body_fat,
            expected_fat_change_kg=expected_fat_gain_kg,
            expected_lean_change_kg=expected_muscle_gain_kg,
            warnings=warnings,
        )

    def _hold(self, profile: UserProfile, tdee: TDEE) -> StrategyOutcome:
        return StrategyOutcome(
            direction=GoalDirection.HOLD,
            raw_target_calories=tdee.value,
            daily_adjustment_kcal=0.0,
            requested_weekly_rate_kg=0.0,
            projected_body_fat_percent=bound_body_fat(profile.body_fat_percent),
        )
