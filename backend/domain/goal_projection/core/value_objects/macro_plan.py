"""MacroPlan value object - preset percentage macro splits."""

from enum import Enum
from typing import Optional, Sequence, Tuple


class MacroPlan(str, Enum):
    """Preset calorie split offered on the macro step of onboarding.

    Percentages are (protein, carbs, fat) shares of the calorie figure.
    ``CUSTOM`` carries no preset; the caller supplies the split.
    """

    BALANCED = "balanced"
    LOW_CARB = "low_carb"
    HIGH_PROTEIN = "high_protein"
    KETOGENIC = "ketogenic"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional["MacroPlan"]:
        """Parse ``"lowCarb"``, ``"low carb"``, ``"high_protein"``...

        Raises:
            ValueError: If the text names no known plan
        """
        if raw is None:
            return None
        if isinstance(raw, MacroPlan):
            return raw
        key = "".join(str(raw).strip().lower().replace("_", " ").replace("-", " ").split())
        if not key:
            return None
        for plan in cls:
            if plan.value.replace("_", "") == key:
                return plan
        if key == "keto":
            return cls.KETOGENIC
        raise ValueError(f"Unrecognised macro plan: {raw!r}")

    def percentages(self) -> Tuple[int, int, int]:
        """(protein, carbs, fat) percentages of the preset.

        Raises:
            ValueError: For ``CUSTOM``, which has no preset
        """
        if self is MacroPlan.CUSTOM:
            raise ValueError("Custom macro plan has no preset split")
        return _PRESETS[self]

    def resolve_split(
        self, custom_split: Optional[Sequence[float]] = None
    ) -> Tuple[float, float, float]:
        """(protein, carbs, fat) percentages, from the preset or ``custom_split``.

        Raises:
            ValueError: If a custom split is missing, malformed, negative or
                does not sum to 100
        """
        if self is not MacroPlan.CUSTOM:
            return self.percentages()
        if custom_split is None:
            raise ValueError("Custom macro plan needs a custom_split")
        if len(custom_split) != 3:
            raise ValueError(f"Split needs protein, carbs and fat, got {custom_split}")
        if any(p < 0 for p in custom_split):
            raise ValueError(f"Split percentages must be non-negative, got {custom_split}")
        if abs(sum(custom_split) - 100) > 1e-6:
            raise ValueError(f"Split percentages must sum to 100, got {sum(custom_split)}")
        protein, carbs, fat = custom_split
        return protein, carbs, fat

    def label(self) -> str:
        labels = {
            MacroPlan.BALANCED: "Balanced",
            MacroPlan.LOW_CARB: "Low Carb",
            MacroPlan.HIGH_PROTEIN: "High Protein",
            MacroPlan.KETOGENIC: "Ketogenic",
            MacroPlan.CUSTOM: "Custom",
        }
        return labels[self]


_PRESETS = {
    MacroPlan.BALANCED: (30, 40, 30),
    MacroPlan.LOW_CARB: (40, 20, 40),
    MacroPlan.HIGH_PROTEIN: (40, 40, 20),
    MacroPlan.KETOGENIC: (30, 10, 60),
}
