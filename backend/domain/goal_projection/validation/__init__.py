"""Profile validation for goal projection."""

from .profile_validator import REQUIRED_FIELDS, ProfileValidator

__all__ = ["ProfileValidator", "REQUIRED_FIELDS"]
