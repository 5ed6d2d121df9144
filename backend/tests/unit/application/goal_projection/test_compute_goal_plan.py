"""Unit tests for ComputeGoalPlanHandler."""

from unittest.mock import Mock

import pytest

from application.goal_projection.queries import (
    ComputeGoalPlanHandler,
    ComputeGoalPlanQuery,
    GoalPlanResult,
)
from domain.goal_projection.core.exceptions import (
    InvalidRangeError,
    MissingFieldError,
)


class TestComputeGoalPlanHandler:
    """Test goal plan query handling."""

    @pytest.fixture
    def handler(self, orchestrator):
        return ComputeGoalPlanHandler(orchestrator)

    def test_complete_document(self, handler, onboarding_document):
        result = handler.handle(ComputeGoalPlanQuery(draft=onboarding_document))

        assert result.ok
        assert result.error is None
        assert result.unwrap().plan.target_calories == 2120

    def test_missing_fields_returned_as_data(self, handler, onboarding_document):
        del onboarding_document["daysToComplete"]
        del onboarding_document["weight"]

        result = handler.handle(ComputeGoalPlanQuery(draft=onboarding_document))

        assert not result.ok
        assert result.projection is None
        assert isinstance(result.error, MissingFieldError)
        assert result.error.fields == ("weight_kg", "days_to_complete")

    def test_invalid_range_returned_as_data(self, handler, onboarding_document):
        onboarding_document["bodyFatPercentage"] = 150

        result = handler.handle(ComputeGoalPlanQuery(draft=onboarding_document))

        assert isinstance(result.error, InvalidRangeError)
        with pytest.raises(InvalidRangeError):
            result.unwrap()

    def test_orchestrator_not_called_for_invalid_draft(self):
        orchestrator = Mock()
        handler = ComputeGoalPlanHandler(orchestrator)

        handler.handle(ComputeGoalPlanQuery(draft={}))

        orchestrator.project.assert_not_called()


class TestMacroPlanSelection:
    @pytest.fixture
    def handler(self, orchestrator):
        return ComputeGoalPlanHandler(orchestrator)

    def test_plan_label_accepted(self, handler, onboarding_document):
        query = ComputeGoalPlanQuery(draft=onboarding_document, macro_plan="lowCarb")

        projection = handler.handle(query).unwrap()

        assert projection.persisted_fields()["macros"] == {
            "protein": 212,
            "carbs": 106,
            "fat": 94,
        }

    def test_unknown_plan_returned_as_data(self, handler, onboarding_document):
        query = ComputeGoalPlanQuery(draft=onboarding_document, macro_plan="carnivore")

        result = handler.handle(query)

        assert isinstance(result.error, InvalidRangeError)
        assert result.error.fields == ("macro_plan",)

    def test_bad_custom_split_returned_as_data(self, handler, onboarding_document):
        query = ComputeGoalPlanQuery(
            draft=onboarding_document, macro_plan="custom", custom_split=[50, 50, 50]
        )

        result = handler.handle(query)

        assert result.error.fields == ("custom_split",)

    def test_custom_without_split_returned_as_data(self, handler, onboarding_document):
        query = ComputeGoalPlanQuery(draft=onboarding_document, macro_plan="custom")

        assert handler.handle(query).error.fields == ("custom_split",)

    def test_profile_errors_reported_first(self, handler):
        result = handler.handle(ComputeGoalPlanQuery(draft={}, macro_plan="carnivore"))

        assert isinstance(result.error, MissingFieldError)


class TestGoalPlanResult:
    def test_requires_exactly_one_outcome(self):
        with pytest.raises(ValueError):
            GoalPlanResult()

        with pytest.raises(ValueError):
            GoalPlanResult(projection=Mock(), error=MissingFieldError(["age"]))
