"""Calculator ports - interfaces for the projection pipeline stages."""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..value_objects.activity_level import ActivityLevel
from ..value_objects.bmr import BMR
from ..value_objects.body_composition import BodyComposition
from ..value_objects.goal import Goal
from ..value_objects.goal_plan import GoalPlan, StrategyOutcome
from ..value_objects.macro_plan import MacroPlan
from ..value_objects.macro_split import MacroSplit
from ..value_objects.muscular_potential import MuscularPotential
from ..value_objects.sex import Sex
from ..value_objects.tdee import TDEE
from ..value_objects.user_profile import UserProfile
from ..value_objects.weight_checkpoint import WeightCheckpoint


class IBMRCalculator(ABC):
    """Port for BMR calculation."""

    @abstractmethod
    def calculate(
        self, weight_kg: float, height_cm: float, age: int, sex: Sex
    ) -> BMR:
        """Calculate BMR from biometric data.

        Args:
            weight_kg: Body weight in kg
            height_cm: Height in cm
            age: Age in years
            sex: Biological sex

        Returns:
            BMR: Calculated basal metabolic rate
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation."""

    @abstractmethod
    def calculate(self, bmr: BMR, activity_level: ActivityLevel) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity level

        Returns:
            TDEE: Total daily energy expenditure
        """
        pass


class IBodyCompositionEstimator(ABC):
    """Port for lean/fat mass estimation."""

    @abstractmethod
    def estimate(self, weight_kg: float, body_fat_percent: float) -> BodyComposition:
        pass


class IGoalStrategy(ABC):
    """Port for goal branching.

    Produces the unclamped calorie target, projected composition and
    advisory warnings for a profile.
    """

    @abstractmethod
    def plan(
        self,
        profile: UserProfile,
        tdee: TDEE,
        composition: BodyComposition,
    ) -> StrategyOutcome:
        pass


class ISafetyClamp(ABC):
    """Port for bounding a raw strategy outcome to safe limits."""

    @abstractmethod
    def apply(
        self,
        outcome: StrategyOutcome,
        tdee: TDEE,
    ) -> GoalPlan:
        pass


class IMacroCalculator(ABC):
    """Port for macronutrient distribution calculation."""

    @abstractmethod
    def calculate(
        self,
        calories_target: int,
        weight_kg: float,
        goal: Goal,
        body_fat_percent: float,
    ) -> MacroSplit:
        """Calculate macro distribution.

        Args:
            calories_target: Final daily calorie target
            weight_kg: Body weight in kg
            goal: Stated goal
            body_fat_percent: Current body fat percentage

        Returns:
            MacroSplit: Protein/carbs/fat in grams
        """
        pass

    @abstractmethod
    def calculate_from_plan(
        self,
        calories_target: int,
        plan: MacroPlan,
        custom_split: Optional[Tuple[float, float, float]] = None,
    ) -> MacroSplit:
        """Split a calorie figure by a preset percentage plan."""
        pass


class IWeightTrajectory(ABC):
    """Port for week-by-week expected weight."""

    @abstractmethod
    def project(
        self, profile: UserProfile, plan: GoalPlan
    ) -> Tuple[WeightCheckpoint, ...]:
        pass


class IMuscularPotentialEstimator(ABC):
    """Port for natural muscular potential from height."""

    @abstractmethod
    def is_defined_for(self, height_cm: float) -> bool:
        pass

    @abstractmethod
    def calculate(self, height_cm: float) -> MuscularPotential:
        pass
