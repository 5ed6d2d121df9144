"""TDEE value object - Total Daily Energy Expenditure."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TDEE:
    """Total Daily Energy Expenditure in kcal/day.

    Calculated as: TDEE = BMR × activity multiplier

    Attributes:
        value: TDEE in kcal/day (must be positive)
    """

    value: float

    def __post_init__(self) -> None:
        """Validate TDEE is positive.

        Raises:
            ValueError: If TDEE is not positive
        """
        if self.value <= 0:
            raise ValueError(f"TDEE must be positive, got {self.value}")

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"
