"""Factory for creating goal projection services."""

from typing import Any, Mapping, Optional, Sequence, Union

from application.goal_projection.orchestrators.projection_orchestrator import (
    ProjectionOrchestrator,
)
from application.goal_projection.queries.compute_goal_plan import (
    ComputeGoalPlanHandler,
    ComputeGoalPlanQuery,
    GoalPlanResult,
)
from domain.goal_projection.calculation import (
    BMRService,
    BodyCompositionService,
    GoalStrategyService,
    MacroService,
    MuscularPotentialService,
    SafetyClampService,
    TDEEService,
    WeightTrajectoryService,
)
from domain.goal_projection.core.policy import ProjectionPolicy
from domain.goal_projection.core.value_objects.macro_plan import MacroPlan
from domain.goal_projection.core.value_objects.profile_draft import (
    ProfileDraft,
)
from infrastructure.config import get_projection_policy, load_env_file

# Singleton instance
_handler: Optional[ComputeGoalPlanHandler] = None


def create_projection_orchestrator(
    policy: Optional[ProjectionPolicy] = None,
) -> ProjectionOrchestrator:
    """
    Create an orchestrator wired with the default calculators.

    Args:
        policy: Projection policy, defaults to env-configured policy

    Returns:
        ProjectionOrchestrator
    """
    policy = policy or get_projection_policy()
    return ProjectionOrchestrator(
        bmr_service=BMRService(),
        tdee_service=TDEEService(),
        composition_service=BodyCompositionService(),
        strategy_service=GoalStrategyService(policy),
        clamp_service=SafetyClampService(policy),
        macro_service=MacroService(),
        trajectory_service=WeightTrajectoryService(),
        potential_service=MuscularPotentialService(),
    )


def get_goal_plan_handler() -> ComputeGoalPlanHandler:
    """
    Get singleton goal plan handler.

    Loads .env on first use, then reads policy overrides once.

    Returns:
        ComputeGoalPlanHandler singleton
    """
    global _handler
    if _handler is None:
        load_env_file()
        _handler = ComputeGoalPlanHandler(create_projection_orchestrator())
    return _handler


def reset_goal_plan_handler() -> None:
    """Drop the singleton so the next call re-reads configuration."""
    global _handler
    _handler = None


def compute_goal_plan(
    draft: Union[ProfileDraft, Mapping[str, Any]],
    macro_plan: Optional[Union[MacroPlan, str]] = None,
    custom_split: Optional[Sequence[float]] = None,
) -> GoalPlanResult:
    """
    Validate a profile and compute its goal plan.

    Args:
        draft: Draft model or raw onboarding user document
        macro_plan: Optional preset macro split ("balanced", "lowCarb"...)
        custom_split: (protein, carbs, fat) percentages for "custom"

    Returns:
        GoalPlanResult with the projection or the validation error
    """
    query = ComputeGoalPlanQuery(
        draft=draft, macro_plan=macro_plan, custom_split=custom_split
    )
    return get_goal_plan_handler().handle(query)
