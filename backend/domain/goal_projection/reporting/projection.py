"""GoalProjection - the assembled result handed back to callers."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..core.value_objects.energy_profile import EnergyProfile
from ..core.value_objects.goal_plan import GoalPlan
from ..core.value_objects.macro_plan import MacroPlan
from ..core.value_objects.macro_split import MacroSplit
from ..core.value_objects.muscular_potential import MuscularPotential
from ..core.value_objects.user_profile import UserProfile
from ..core.value_objects.weight_checkpoint import WeightCheckpoint


@dataclass(frozen=True)
class GoalProjection:
    """Energy profile, goal plan and macros for one profile.

    Produced fresh per invocation; the caller owns persistence.
    ``macro_plan`` is set when the macros come from a preset percentage
    split rather than the goal-based allocation. ``muscular_potential`` is
    None for heights the estimate does not cover.
    """

    profile: UserProfile
    energy: EnergyProfile
    plan: GoalPlan
    macros: MacroSplit
    trajectory: Tuple[WeightCheckpoint, ...] = ()
    muscular_potential: Optional[MuscularPotential] = None
    macro_plan: Optional[MacroPlan] = None

    def persisted_fields(self) -> Dict[str, Any]:
        """The ``{tdee, targetCalories, macros}`` triple stored on the user.

        Keys match the onboarding user document.
        """
        return {
            "tdee": self.energy.tdee_kcal,
            "targetCalories": self.plan.target_calories,
            "macros": {
                "protein": self.macros.protein_g,
                "carbs": self.macros.carbs_g,
                "fat": self.macros.fat_g,
            },
        }

    def to_dict(self) -> Dict[str, Any]:
        """Full structured breakdown (JSON-serialisable)."""
        plan = self.plan
        return {
            "persisted": self.persisted_fields(),
            "energy": {
                "bmr_kcal": self.energy.bmr_kcal,
                "tdee_kcal": self.energy.tdee_kcal,
                "lean_mass_kg": self.energy.lean_mass_kg,
                "fat_mass_kg": self.energy.fat_mass_kg,
            },
            "plan": {
                "direction": plan.direction.value,
                "target_calories": plan.target_calories,
                "raw_target_calories": plan.raw_target_calories,
                "min_calories_floor": plan.min_calories_floor,
                "recommended_deficit_kcal": plan.recommended_deficit_kcal,
                "deficit_or_surplus_percent": plan.deficit_or_surplus_percent,
                "weekly_rate_kg": plan.weekly_rate_kg,
                "projected_body_fat_percent": plan.projected_body_fat_percent,
                "expected_fat_change_kg": plan.expected_fat_change_kg,
                "expected_lean_change_kg": plan.expected_lean_change_kg,
                "was_clamped": plan.was_clamped,
                "warnings": [w.value for w in plan.warnings],
            },
            "macros": {
                "plan": self.macro_plan.value if self.macro_plan else None,
                "protein_g": self.macros.protein_g,
                "carbs_g": self.macros.carbs_g,
                "fat_g": self.macros.fat_g,
            },
            "trajectory": [
                {"week": c.week, "day": c.day, "weight_kg": c.weight_kg}
                for c in self.trajectory
            ],
            "muscular_potential": _potential_dict(self.muscular_potential),
        }


def _potential_dict(potential: Optional[MuscularPotential]) -> Optional[Dict[str, Any]]:
    if potential is None:
        return None
    return {
        "lean_mass_kg": potential.lean_mass_kg,
        "stage_weights": [
            {"body_fat_percent": percent, "weight_kg": weight}
            for percent, weight in potential.stage_weights
        ],
    }
