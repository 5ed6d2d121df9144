"""EnergyProfile value object - derived energy expenditure and composition."""

from dataclasses import dataclass

from .body_composition import BodyComposition
from .bmr import BMR
from .tdee import TDEE


@dataclass(frozen=True)
class EnergyProfile:
    """Energy expenditure and body composition derived from a profile.

    Recomputed on every call, never cached or mutated in place.
    """

    bmr: BMR
    tdee: TDEE
    composition: BodyComposition

    @property
    def bmr_kcal(self) -> float:
        return self.bmr.value

    @property
    def tdee_kcal(self) -> float:
        return self.tdee.value

    @property
    def lean_mass_kg(self) -> float:
        return self.composition.lean_mass_kg

    @property
    def fat_mass_kg(self) -> float:
        return self.composition.fat_mass_kg
