"""BMRService - Basal Metabolic Rate calculation."""

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.bmr import BMR
from ..core.value_objects.sex import Sex

# Mifflin-St Jeor sex constants
MALE_CONSTANT = 5.0
FEMALE_CONSTANT = -161.0


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Formula:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def calculate(
        self, weight_kg: float, height_cm: float, age: int, sex: Sex
    ) -> BMR:
        """Calculate BMR from biometric data.

        Deterministic and unclamped.

        Returns:
            BMR: Calculated basal metabolic rate in kcal/day

        Example:
            >>> BMRService().calculate(80.0, 180.0, 30, Sex.MALE).value
            1780.0
        """
        return BMR(value=self.resting_energy(weight_kg, height_cm, age, sex))

    def resting_energy(
        self, weight_kg: float, height_cm: float, age: int, sex: Sex
    ) -> float:
        """Raw Mifflin-St Jeor value; may be zero or negative for tiny inputs."""
        base = 10 * weight_kg + 6.25 * height_cm - 5 * age

        if sex is Sex.MALE:
            return base + MALE_CONSTANT
        return base + FEMALE_CONSTANT
