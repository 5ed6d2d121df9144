"""MuscularPotential value object - natural lean mass ceiling."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class MuscularPotential:
    """Maximum lean mass and matching stage weights.

    Attributes:
        lean_mass_kg: Maximum lean body mass (height in cm - 100)
        stage_weights: (body fat %, body weight kg) pairs
    """

    lean_mass_kg: float
    stage_weights: Tuple[Tuple[float, float], ...]

    def weight_at(self, body_fat_percent: float) -> float:
        for percent, weight in self.stage_weights:
            if percent == body_fat_percent:
                return weight
        raise KeyError(body_fat_percent)
