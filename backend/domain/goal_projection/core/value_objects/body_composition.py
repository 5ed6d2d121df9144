"""BodyComposition value object - lean and fat mass split."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BodyComposition:
    """Lean mass and fat mass in kilograms.

    Attributes:
        lean_mass_kg: Lean body mass (LBM)
        fat_mass_kg: Fat mass
    """

    lean_mass_kg: float
    fat_mass_kg: float

    def __post_init__(self) -> None:
        if self.lean_mass_kg < 0:
            raise ValueError(
                f"Lean mass must be non-negative, got {self.lean_mass_kg}"
            )
        if self.fat_mass_kg < 0:
            raise ValueError(
                f"Fat mass must be non-negative, got {self.fat_mass_kg}"
            )

    @property
    def total_kg(self) -> float:
        return self.lean_mass_kg + self.fat_mass_kg

    def body_fat_percent(self) -> float:
        """Fat mass as a percentage of total mass."""
        total = self.total_kg
        if total == 0:
            return 0.0
        return self.fat_mass_kg / total * 100
