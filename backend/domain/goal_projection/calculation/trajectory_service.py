"""WeightTrajectoryService - weekly expected weight checkpoints."""

import math
from typing import Tuple

from ..core.ports.calculators import IWeightTrajectory
from ..core.value_objects.goal_direction import GoalDirection
from ..core.value_objects.goal_plan import GoalPlan
from ..core.value_objects.user_profile import UserProfile
from ..core.value_objects.weight_checkpoint import WeightCheckpoint


class WeightTrajectoryService(IWeightTrajectory):
    """Project weight week by week from the final (clamped) weekly rate.

    The trajectory never passes the goal weight. Because the rate comes
    from the clamped target, an over-ambitious timeline shows up as a
    trajectory that ends short of the goal.
    """

    def project(self, profile: UserProfile, plan: GoalPlan) -> Tuple[WeightCheckpoint, ...]:
        weeks = math.ceil(profile.days_to_complete / 7)
        checkpoints = []
        for week in range(weeks + 1):
            day = min(week * 7, profile.days_to_complete)
            weight = profile.weight_kg + plan.weekly_rate_kg * day / 7
            if plan.direction is GoalDirection.LOSS:
                weight = max(weight, profile.goal_weight_kg)
            elif plan.direction is GoalDirection.GAIN:
                weight = min(weight, profile.goal_weight_kg)
            else:
                weight = profile.weight_kg
            checkpoints.append(WeightCheckpoint(week=week, day=day, weight_kg=weight))
        return tuple(checkpoints)
