"""BodyCompositionService - lean mass / fat mass estimation."""

from ..core.ports.calculators import IBodyCompositionEstimator
from ..core.value_objects.body_composition import BodyComposition


class BodyCompositionService(IBodyCompositionEstimator):
    """Split body weight into lean and fat mass from body-fat percentage."""

    def estimate(self, weight_kg: float, body_fat_percent: float) -> BodyComposition:
        """
        Example:
            >>> c = BodyCompositionService().estimate(80.0, 20.0)
            >>> (c.lean_mass_kg, c.fat_mass_kg)
            (64.0, 16.0)
        """
        fraction = body_fat_percent / 100
        return BodyComposition(
            lean_mass_kg=weight_kg * (1 - fraction),
            fat_mass_kg=weight_kg * fraction,
        )
