"""UserProfile value object - complete profile ready for computation."""

from dataclasses import dataclass

from .activity_level import ActivityLevel
from .goal import Goal
from .sex import Sex


@dataclass(frozen=True)
class UserProfile:
    """Complete, validated biometric profile and goal.

    Produced by ``ProfileValidator`` from a ``ProfileDraft``; every field
    is present and in range. Instances are passed by value into the
    engine and never modified.

    Attributes:
        weight_kg: Current body weight
        height_cm: Height
        age: Age in years
        sex: Biological sex
        activity_level: Physical activity category
        body_fat_percent: Body fat percentage (0-100)
        goal: Stated goal
        goal_weight_kg: Target body weight
        days_to_complete: Days allowed to reach the goal weight
    """

    weight_kg: float
    height_cm: float
    age: int
    sex: Sex
    activity_level: ActivityLevel
    body_fat_percent: float
    goal: Goal
    goal_weight_kg: float
    days_to_complete: int

    def __post_init__(self) -> None:
        """Validate ranges.

        Raises:
            InvalidRangeError: If any constraint is violated
        """
        # Import here to avoid circular dependency
        from ..exceptions.domain_errors import InvalidRangeError

        reasons = {}
        if self.weight_kg <= 0:
            reasons["weight_kg"] = f"must be positive, got {self.weight_kg}"
        if self.height_cm <= 0:
            reasons["height_cm"] = f"must be positive, got {self.height_cm}"
        if self.age <= 0:
            reasons["age"] = f"must be positive, got {self.age}"
        if not (0.0 <= self.body_fat_percent <= 100.0):
            reasons["body_fat_percent"] = (
                f"must be within 0-100, got {self.body_fat_percent}"
            )
        if self.goal_weight_kg <= 0:
            reasons["goal_weight_kg"] = (
                f"must be positive, got {self.goal_weight_kg}"
            )
        if self.days_to_complete <= 0:
            reasons["days_to_complete"] = (
                f"must be positive, got {self.days_to_complete}"
            )
        if reasons:
            raise InvalidRangeError(reasons)

    @property
    def weight_delta_kg(self) -> float:
        """Goal weight minus current weight (negative means loss)."""
        return self.goal_weight_kg - self.weight_kg

    @property
    def weeks(self) -> float:
        return self.days_to_complete / 7

    def bmi(self) -> float:
        """Calculate Body Mass Index.

        Returns:
            float: BMI = weight (kg) / (height (m))^2
        """
        height_m = self.height_cm / 100.0
        return self.weight_kg / (height_m ** 2)

    def bmi_category(self) -> str:
        """Get BMI category classification.

        Returns:
            str: BMI category (underweight, normal, overweight, obese)
        """
        bmi_value = self.bmi()
        if bmi_value < 18.5:
            return "underweight"
        elif bmi_value < 25.0:
            return "normal"
        elif bmi_value < 30.0:
            return "overweight"
        else:
            return "obese"
