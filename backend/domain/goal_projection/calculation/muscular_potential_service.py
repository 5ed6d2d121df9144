"""MuscularPotentialService - Berkhan maximum muscular potential."""

from ..core.exceptions.domain_errors import InvalidRangeError
from ..core.ports.calculators import IMuscularPotentialEstimator
from ..core.value_objects.muscular_potential import MuscularPotential

# Berkhan: max lean mass (kg) = height (cm) - this offset
HEIGHT_OFFSET_CM = 100.0


class MuscularPotentialService(IMuscularPotentialEstimator):
    """Estimate natural muscular potential from height (Martin Berkhan).

    Formula:
        max LBM (kg)  = height (cm) - 100
        stage weight  = max LBM / (1 - body fat)

    Useful as a ceiling when a user sets a gain goal.
    """

    BODY_FAT_LEVELS = (5.0, 10.0, 15.0)

    def is_defined_for(self, height_cm: float) -> bool:
        return height_cm > HEIGHT_OFFSET_CM

    def calculate(self, height_cm: float) -> MuscularPotential:
        """
        Example:
            >>> MuscularPotentialService().calculate(180.0).weight_at(10.0)
            88.88888888888889
        """
        if not self.is_defined_for(height_cm):
            raise InvalidRangeError(
                {"height_cm": f"must exceed 100 cm for this estimate, got {height_cm}"}
            )
        lean_mass = height_cm - HEIGHT_OFFSET_CM
        stage_weights = tuple(
            (percent, lean_mass / (1 - percent / 100))
            for percent in self.BODY_FAT_LEVELS
        )
        return MuscularPotential(lean_mass_kg=lean_mass, stage_weights=stage_weights)
