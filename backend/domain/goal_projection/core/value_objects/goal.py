"""Goal value object - user's stated weight objective."""

from enum import Enum
from typing import Optional


class Goal(str, Enum):
    """User's goal determining the strategy branch.

    - LOSE_WEIGHT: calorie deficit towards a lower goal weight
    - GAIN_WEIGHT: calorie surplus towards a higher goal weight
    - MAINTAIN: eat at TDEE
    """

    LOSE_WEIGHT = "lose_weight"
    GAIN_WEIGHT = "gain_weight"
    MAINTAIN = "maintain"

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional["Goal"]:
        """Parse an enum value or an onboarding label.

        Unlike activity levels there is no default: an unknown goal is a
        validation failure, not a silent fallthrough.

        Raises:
            ValueError: If the text names no known goal
        """
        if raw is None:
            return None
        if isinstance(raw, Goal):
            return raw
        key = "".join(str(raw).strip().lower().replace("_", " ").split())
        if not key:
            return None
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(f"Unrecognised goal: {raw!r}") from None

    def protein_multiplier(self) -> float:
        """Get protein requirement multiplier (g/kg body weight).

        Returns:
            float: Protein grams per kg body weight

        Example:
            >>> Goal.LOSE_WEIGHT.protein_multiplier()
            2.2
        """
        multipliers = {
            Goal.LOSE_WEIGHT: 2.2,  # Higher protein to preserve muscle
            Goal.GAIN_WEIGHT: 1.8,
            Goal.MAINTAIN: 2.0,
        }
        return multipliers[self]

    def label(self) -> str:
        """Human-readable label."""
        labels = {
            Goal.LOSE_WEIGHT: "Lose weight",
            Goal.GAIN_WEIGHT: "Gain weight",
            Goal.MAINTAIN: "Maintain",
        }
        return labels[self]


_ALIASES = {
    "loseweight": Goal.LOSE_WEIGHT,
    "lose": Goal.LOSE_WEIGHT,
    "cut": Goal.LOSE_WEIGHT,
    "gainweight": Goal.GAIN_WEIGHT,
    "gain": Goal.GAIN_WEIGHT,
    "bulk": Goal.GAIN_WEIGHT,
    "maintain": Goal.MAINTAIN,
    "maintainweight": Goal.MAINTAIN,
}
