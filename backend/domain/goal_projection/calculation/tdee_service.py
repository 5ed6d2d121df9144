"""TDEEService - Total Daily Energy Expenditure calculation."""

from typing import Union

from ..core.policy import TDEE_ACTIVITY_MULTIPLIERS
from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.bmr import BMR
from ..core.value_objects.tdee import TDEE


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    Formula:
        TDEE = BMR × multiplier

    Multipliers (``TDEE_ACTIVITY_MULTIPLIERS``):
        - Sedentary: 1.2
        - Lightly active: 1.375
        - Moderately active: 1.5
        - Active: 1.7
        - Very active: 1.9

    Anything unrecognised is weighted as lightly active.
    """

    def multiplier(self, activity_level: Union[ActivityLevel, str, None]) -> float:
        """Look up the TDEE multiplier for an activity level.

        Example:
            >>> TDEEService().multiplier("Desk job, weekend hikes")
            1.375
        """
        level = ActivityLevel.parse(activity_level) or ActivityLevel.default()
        return TDEE_ACTIVITY_MULTIPLIERS.get(
            level, TDEE_ACTIVITY_MULTIPLIERS[ActivityLevel.default()]
        )

    def calculate(self, bmr: BMR, activity_level: ActivityLevel) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Example:
            >>> TDEEService().calculate(BMR(1780.0), ActivityLevel.MODERATELY_ACTIVE).value
            2670.0
        """
        return TDEE(value=bmr.value * self.multiplier(activity_level))
