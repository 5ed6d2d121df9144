"""Domain exceptions for goal projection."""

from typing import Iterable, Mapping


class GoalProjectionError(Exception):
    """Base exception for goal projection domain errors."""

    pass


class ProfileValidationError(GoalProjectionError):
    """Raised when a profile cannot be converted for computation.

    Attributes:
        fields: Identifiers of the offending fields, in profile order
    """

    def __init__(self, message: str, fields: Iterable[str]):
        super().__init__(message)
        self.fields = tuple(fields)


class MissingFieldError(ProfileValidationError):
    """Raised when one or more required profile fields are absent."""

    def __init__(self, fields: Iterable[str]):
        fields = tuple(fields)
        super().__init__(
            f"Missing required profile fields: {', '.join(fields)}", fields
        )


class InvalidRangeError(ProfileValidationError):
    """Raised when present profile fields hold out-of-range values.

    Attributes:
        reasons: Field identifier -> human-readable reason
    """

    def __init__(self, reasons: Mapping[str, str]):
        self.reasons = dict(reasons)
        detail = "; ".join(f"{k} {v}" for k, v in self.reasons.items())
        super().__init__(f"Invalid profile fields: {detail}", self.reasons)


class InvalidPolicyError(GoalProjectionError):
    """Raised when projection policy overrides are invalid."""

    pass
