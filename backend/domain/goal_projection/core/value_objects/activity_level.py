"""ActivityLevel value object - physical activity level for TDEE."""

from enum import Enum
from typing import Optional


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) category.

    Closed set of categories used to weight BMR. Multipliers live in
    ``core.policy`` (two distinct tables), display text lives in
    ``label()``; the engine never keys on display strings.
    """

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    @classmethod
    def default(cls) -> "ActivityLevel":
        """Category used when the stored level is not recognised."""
        return cls.LIGHTLY_ACTIVE

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional["ActivityLevel"]:
        """Parse an enum value or an onboarding display label.

        Accepts ``"moderately_active"``, ``"Moderately Active"``,
        ``"ModeratelyActive"`` and the short aliases of other services
        (``"light"``, ``"moderate"``). Unknown text falls back to
        ``LIGHTLY_ACTIVE``; ``None`` or blank text stays ``None`` so the
        validator can report the field as missing.

        Example:
            >>> ActivityLevel.parse("Moderately Active")
            <ActivityLevel.MODERATELY_ACTIVE: 'moderately_active'>
            >>> ActivityLevel.parse("couch potato")
            <ActivityLevel.LIGHTLY_ACTIVE: 'lightly_active'>
        """
        if raw is None:
            return None
        if isinstance(raw, ActivityLevel):
            return raw
        key = str(raw).strip().lower().replace("-", " ").replace("_", " ")
        if not key:
            return None
        key = "".join(key.split())
        return _ALIASES.get(key, cls.default())

    def label(self) -> str:
        """Human-readable label shown by the onboarding UI."""
        return _LABELS[self]

    def description(self) -> str:
        """Get human-readable description.

        Returns:
            str: Activity level description
        """
        descriptions = {
            ActivityLevel.SEDENTARY: "Little or no exercise",
            ActivityLevel.LIGHTLY_ACTIVE: "Light exercise 1-3 days/week",
            ActivityLevel.MODERATELY_ACTIVE: "Moderate exercise 3-5 days/week",
            ActivityLevel.ACTIVE: "Hard exercise 6-7 days/week",
            ActivityLevel.VERY_ACTIVE: "Very hard exercise + physical job",
        }
        return descriptions[self]


_LABELS = {
    ActivityLevel.SEDENTARY: "Sedentary",
    ActivityLevel.LIGHTLY_ACTIVE: "Lightly Active",
    ActivityLevel.MODERATELY_ACTIVE: "Moderately Active",
    ActivityLevel.ACTIVE: "Active",
    ActivityLevel.VERY_ACTIVE: "Very Active",
}

# Keys are lowercased with whitespace removed
_ALIASES = {
    "sedentary": ActivityLevel.SEDENTARY,
    "lightlyactive": ActivityLevel.LIGHTLY_ACTIVE,
    "light": ActivityLevel.LIGHTLY_ACTIVE,
    "moderatelyactive": ActivityLevel.MODERATELY_ACTIVE,
    "moderate": ActivityLevel.MODERATELY_ACTIVE,
    "active": ActivityLevel.ACTIVE,
    "veryactive": ActivityLevel.VERY_ACTIVE,
    "extraactive": ActivityLevel.VERY_ACTIVE,
}
