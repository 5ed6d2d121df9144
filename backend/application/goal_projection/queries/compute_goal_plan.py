"""ComputeGoalPlanQuery - validate a draft profile and project its goal."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Union

from domain.goal_projection.core.exceptions.domain_errors import (
    InvalidRangeError,
    ProfileValidationError,
)
from domain.goal_projection.core.value_objects.macro_plan import MacroPlan
from domain.goal_projection.core.value_objects.profile_draft import (
    ProfileDraft,
)
from domain.goal_projection.reporting.projection import GoalProjection
from domain.goal_projection.validation.profile_validator import (
    ProfileValidator,
)

from ..orchestrators.projection_orchestrator import ProjectionOrchestrator


@dataclass(frozen=True)
class ComputeGoalPlanQuery:
    """Query to compute a goal plan.

    Attributes:
        draft: Onboarding profile (draft model or raw user document)
        macro_plan: Preset macro split (enum or label such as "lowCarb");
            goal-based allocation when omitted
        custom_split: (protein, carbs, fat) percentages for a custom plan
    """

    draft: Union[ProfileDraft, Mapping[str, Any]]
    macro_plan: Optional[Union[MacroPlan, str]] = None
    custom_split: Optional[Sequence[float]] = None


@dataclass(frozen=True)
class GoalPlanResult:
    """Either a projection or the validation error that prevented it.

    Exactly one of ``projection`` and ``error`` is set; no partial plan is
    ever produced.
    """

    projection: Optional[GoalProjection] = None
    error: Optional[ProfileValidationError] = None

    def __post_init__(self) -> None:
        if (self.projection is None) == (self.error is None):
            raise ValueError("GoalPlanResult needs exactly one of projection or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> GoalProjection:
        """Return the projection or raise the validation error."""
        if self.error is not None:
            raise self.error
        return self.projection


class ComputeGoalPlanHandler:
    """Handler for ComputeGoalPlanQuery.

    Called by the onboarding flow whenever a step completes. Missing or
    invalid fields come back as data for UI prompting rather than as a
    raised exception.
    """

    def __init__(
        self,
        orchestrator: ProjectionOrchestrator,
        validator: Optional[ProfileValidator] = None,
    ):
        self._orchestrator = orchestrator
        self._validator = validator or ProfileValidator()

    def handle(self, query: ComputeGoalPlanQuery) -> GoalPlanResult:
        """
        Handle goal plan query.

        Args:
            query: Query carrying the draft profile

        Returns:
            GoalPlanResult with projection, or the validation error
        """
        try:
            profile = self._validator.validate(query.draft)
            macro_plan = _resolve_macro_plan(query)
        except ProfileValidationError as e:
            return GoalPlanResult(error=e)

        projection = self._orchestrator.project(
            profile,
            macro_plan=macro_plan,
            custom_split=tuple(query.custom_split) if query.custom_split else None,
        )
        return GoalPlanResult(projection=projection)


def _resolve_macro_plan(query: ComputeGoalPlanQuery) -> Optional[MacroPlan]:
    try:
        plan = MacroPlan.parse(query.macro_plan)
    except ValueError as e:
        raise InvalidRangeError({"macro_plan": str(e)}) from e
    if plan is None:
        return None
    try:
        plan.resolve_split(query.custom_split)
    except ValueError as e:
        raise InvalidRangeError({"custom_split": str(e)}) from e
    return plan
