"""WeightCheckpoint value object - expected weight at a point in the plan."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WeightCheckpoint:
    """Expected body weight at the end of a week."""

    week: int
    day: int
    weight_kg: float
