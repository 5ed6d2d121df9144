"""WarningKind value object - advisory, non-fatal plan warnings."""

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..policy import ProjectionPolicy


class WarningKind(str, Enum):
    """Advisory warnings returned with a goal plan.

    Warnings are data; they never stop the computation.
    """

    RAPID_LOSS = "rapid_loss"
    AGGRESSIVE_DEFICIT = "aggressive_deficit"
    RAPID_GAIN = "rapid_gain"
    GOAL_DIRECTION_MISMATCH = "goal_direction_mismatch"

    def message(self, policy: Optional["ProjectionPolicy"] = None) -> str:
        """Plain-English explanation for the narrative.

        Thresholds are read from ``policy`` (default policy if omitted), so
        the text matches the limits that raised the warning.

        Example:
            >>> WarningKind.RAPID_GAIN.message()
            'Requested gain exceeds 0.5 kg per week; expect more fat gain.'
        """
        # Import here to avoid circular dependency
        from ..policy import DEFAULT_POLICY

        p = policy or DEFAULT_POLICY
        if self is WarningKind.RAPID_LOSS:
            return (
                f"Requested loss exceeds {p.rapid_loss_kg_per_week:g} kg per week; "
                "the target may not be sustainable."
            )
        if self is WarningKind.AGGRESSIVE_DEFICIT:
            return (
                f"Requested deficit exceeds {p.aggressive_deficit_percent:g}% "
                "of TDEE."
            )
        if self is WarningKind.RAPID_GAIN:
            return (
                f"Requested gain exceeds {p.rapid_gain_kg_per_week:g} kg per week; "
                "expect more fat gain."
            )
        return "Goal weight points the other way from the selected goal."
