"""Domain exceptions for goal projection."""

from .domain_errors import (
    GoalProjectionError,
    InvalidPolicyError,
    InvalidRangeError,
    MissingFieldError,
    ProfileValidationError,
)

__all__ = [
    "GoalProjectionError",
    "ProfileValidationError",
    "MissingFieldError",
    "InvalidRangeError",
    "InvalidPolicyError",
]
