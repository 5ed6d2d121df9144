"""Plain-English narrative for a goal projection.

Presentation only: the structured ``GoalProjection`` is the contract;
this text is one rendering of it. Localised renderings belong to the UI.
"""

from typing import List, Optional

from ..core.policy import ProjectionPolicy
from ..core.value_objects.goal_direction import GoalDirection
from .projection import GoalProjection


def render_narrative(
    projection: GoalProjection, policy: Optional[ProjectionPolicy] = None
) -> str:
    """Render a short multi-line summary.

    Warning lines quote the thresholds of ``policy``; pass the policy the
    projection was computed with when it differs from the default.

    Example output::

        Weight: 80 kg
        Fat Mass: 16 kg
        TDEE: 2670 kcal, BMR: 1780 kcal, LBM: 64 kg
        Your body fat percentage will be 15.7%
        You will need to eat 2120 calories (20% deficit) per day for 70 days to reach your goal.
    """
    profile = projection.profile
    energy = projection.energy
    plan = projection.plan

    lines: List[str] = [
        f"Weight: {profile.weight_kg:.0f} kg",
        f"Fat Mass: {energy.fat_mass_kg:.0f} kg",
        f"TDEE: {energy.tdee_kcal:.0f} kcal, BMR: {energy.bmr_kcal:.0f} kcal, "
        f"LBM: {energy.lean_mass_kg:.0f} kg",
        f"Your body fat percentage will be {plan.projected_body_fat_percent:.1f}%",
    ]

    percent = abs(plan.deficit_or_surplus_percent)
    if plan.direction is GoalDirection.LOSS:
        lines.append(
            f"You will need to eat {plan.target_calories} calories "
            f"({int(percent)}% deficit) per day for {profile.days_to_complete} "
            "days to reach your goal."
        )
    elif plan.direction is GoalDirection.GAIN:
        lines.append(
            f"You will need to eat {plan.target_calories} calories "
            f"({int(percent)}% surplus) per day for {profile.days_to_complete} "
            "days to reach your goal."
        )
    else:
        lines.append(
            f"Eat {plan.target_calories} calories per day to maintain your weight."
        )

    if plan.direction is not GoalDirection.HOLD:
        lines.append(f"Expected pace: {abs(plan.weekly_rate_kg):.2f} kg per week.")

    for warning in plan.warnings:
        lines.append(f"Warning: {warning.message(policy)}")

    return "\n".join(lines)
