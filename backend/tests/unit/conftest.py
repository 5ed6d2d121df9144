"""Unit test configuration.

Isolates unit tests from integration test setup.
Unit tests should not depend on external services.
"""

from typing import Any, Callable

import pytest

from application.goal_projection.orchestrators import ProjectionOrchestrator
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
from domain.goal_projection.core.policy import DEFAULT_POLICY
from domain.goal_projection.core.value_objects import (
    ActivityLevel,
    Goal,
    Sex,
    UserProfile,
)


def _make_profile(**overrides: Any) -> UserProfile:
    data = dict(
        weight_kg=80.0,
        height_cm=180.0,
        age=30,
        sex=Sex.MALE,
        activity_level=ActivityLevel.MODERATELY_ACTIVE,
        body_fat_percent=20.0,
        goal=Goal.LOSE_WEIGHT,
        goal_weight_kg=75.0,
        days_to_complete=70,
    )
    data.update(overrides)
    return UserProfile(**data)


@pytest.fixture
def make_profile() -> Callable[..., UserProfile]:
    """Factory for complete profiles.

    Defaults: 30y male, 80kg, 180cm, moderately active, 20% body fat,
    losing 5kg in 70 days.
    """
    return _make_profile


@pytest.fixture
def male_loss_profile() -> UserProfile:
    return _make_profile()


@pytest.fixture
def female_maintain_profile() -> UserProfile:
    return _make_profile(
        weight_kg=60.0,
        height_cm=165.0,
        age=25,
        sex=Sex.FEMALE,
        activity_level=ActivityLevel.SEDENTARY,
        body_fat_percent=25.0,
        goal=Goal.MAINTAIN,
        goal_weight_kg=60.0,
        days_to_complete=90,
    )


@pytest.fixture
def onboarding_document() -> dict:
    """User document as stored by the onboarding flow (camelCase keys)."""
    return {
        "weight": 80.0,
        "height": 180.0,
        "age": 30,
        "sex": "Male",
        "activityLevel": "Moderately Active",
        "bodyFatPercentage": 20.0,
        "goalWeight": 75.0,
        "daysToComplete": 70,
        "goal": "LoseWeight",
    }


@pytest.fixture
def orchestrator() -> ProjectionOrchestrator:
    """Orchestrator wired with real calculators and the default policy."""
    return ProjectionOrchestrator(
        bmr_service=BMRService(),
        tdee_service=TDEEService(),
        composition_service=BodyCompositionService(),
        strategy_service=GoalStrategyService(DEFAULT_POLICY),
        clamp_service=SafetyClampService(DEFAULT_POLICY),
        macro_service=MacroService(),
        trajectory_service=WeightTrajectoryService(),
        potential_service=MuscularPotentialService(),
    )
