"""ProjectionOrchestrator - coordinates the goal projection pipeline."""

import logging
from typing import Optional, Tuple

from domain.goal_projection.core.ports.calculators import (
    IBMRCalculator,
    IBodyCompositionEstimator,
    IGoalStrategy,
    IMacroCalculator,
    IMuscularPotentialEstimator,
    ISafetyClamp,
    ITDEECalculator,
    IWeightTrajectory,
)
from domain.goal_projection.core.value_objects.energy_profile import (
    EnergyProfile,
)
from domain.goal_projection.core.value_objects.macro_plan import MacroPlan
from domain.goal_projection.core.value_objects.user_profile import UserProfile
from domain.goal_projection.reporting.projection import GoalProjection

logger = logging.getLogger(__name__)


class ProjectionOrchestrator:
    """
    Orchestrates calculation services for a goal projection.

    Flow:
    1. Calculate BMR from the profile's biometric data
    2. Calculate TDEE from BMR and activity level
    3. Estimate lean/fat mass
    4. Select the goal branch and compute the raw target
    5. Clamp the target to safe limits
    6. Allocate macros from the final target (goal-based or preset plan)
    7. Project the weekly weight trajectory and muscular potential

    Every step is a pure transformation; the orchestrator keeps no state
    between calls and may be shared across threads.
    """

    def __init__(
        self,
        bmr_service: IBMRCalculator,
        tdee_service: ITDEECalculator,
        composition_service: IBodyCompositionEstimator,
        strategy_service: IGoalStrategy,
        clamp_service: ISafetyClamp,
        macro_service: IMacroCalculator,
        trajectory_service: IWeightTrajectory,
        potential_service: IMuscularPotentialEstimator,
    ):
        self._bmr_service = bmr_service
        self._tdee_service = tdee_service
        self._composition_service = composition_service
        self._strategy_service = strategy_service
        self._clamp_service = clamp_service
        self._macro_service = macro_service
        self._trajectory_service = trajectory_service
        self._potential_service = potential_service

    def calculate_energy(self, profile: UserProfile) -> EnergyProfile:
        """Compute BMR, TDEE and body composition for a profile."""
        bmr = self._bmr_service.calculate(
            weight_kg=profile.weight_kg,
            height_cm=profile.height_cm,
            age=profile.age,
            sex=profile.sex,
        )
        tdee = self._tdee_service.calculate(
            bmr=bmr,
            activity_level=profile.activity_level,
        )
        composition = self._composition_service.estimate(
            weight_kg=profile.weight_kg,
            body_fat_percent=profile.body_fat_percent,
        )
        return EnergyProfile(bmr=bmr, tdee=tdee, composition=composition)

    def project(
        self,
        profile: UserProfile,
        macro_plan: Optional[MacroPlan] = None,
        custom_split: Optional[Tuple[float, float, float]] = None,
    ) -> GoalProjection:
        """
        Calculate the complete goal projection.

        Args:
            profile: Complete, validated user profile
            macro_plan: Preset percentage split; goal-based grams if None
            custom_split: (protein, carbs, fat) percentages for CUSTOM

        Returns:
            GoalProjection with energy profile, plan and macros
        """
        energy = self.calculate_energy(profile)

        outcome = self._strategy_service.plan(
            profile=profile,
            tdee=energy.tdee,
            composition=energy.composition,
        )
        plan = self._clamp_service.apply(outcome=outcome, tdee=energy.tdee)

        if macro_plan is None:
            macros = self._macro_service.calculate(
                calories_target=plan.target_calories,
                weight_kg=profile.weight_kg,
                goal=profile.goal,
                body_fat_percent=profile.body_fat_percent,
            )
        else:
            macros = self._macro_service.calculate_from_plan(
                calories_target=plan.target_calories,
                plan=macro_plan,
                custom_split=custom_split,
            )

        trajectory = self._trajectory_service.project(profile=profile, plan=plan)
        potential = None
        if self._potential_service.is_defined_for(profile.height_cm):
            potential = self._potential_service.calculate(profile.height_cm)

        logger.info(
            "Goal projection computed",
            extra={
                "direction": plan.direction.value,
                "tdee_kcal": round(energy.tdee_kcal, 1),
                "target_calories": plan.target_calories,
                "warnings": [w.value for w in plan.warnings],
            },
        )
        return GoalProjection(
            profile=profile,
            energy=energy,
            plan=plan,
            macros=macros,
            trajectory=trajectory,
            muscular_potential=potential,
            macro_plan=macro_plan,
        )
