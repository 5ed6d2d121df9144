"""Sex value object - biological sex for BMR."""

from enum import Enum
from typing import Optional


class Sex(str, Enum):
    """Biological sex used by the Mifflin-St Jeor sex constant."""

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional["Sex"]:
        """Parse ``"Male"``, ``"female"``, ``"M"`` or ``"F"``.

        Returns ``None`` for blank input.

        Raises:
            ValueError: If the text names neither sex
        """
        if raw is None:
            return None
        if isinstance(raw, Sex):
            return raw
        key = str(raw).strip().lower()
        if not key:
            return None
        if key in ("male", "m"):
            return cls.MALE
        if key in ("female", "f"):
            return cls.FEMALE
        raise ValueError(f"Unrecognised sex: {raw!r}")
