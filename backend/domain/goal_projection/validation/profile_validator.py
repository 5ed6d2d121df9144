"""ProfileValidator - conversion boundary from draft to complete profile."""

import logging
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from ..calculation.bmr_service import BMRService
from ..core.exceptions.domain_errors import InvalidRangeError, MissingFieldError
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.goal import Goal
from ..core.value_objects.profile_draft import ProfileDraft
from ..core.value_objects.sex import Sex
from ..core.value_objects.user_profile import UserProfile

logger = logging.getLogger(__name__)

# Required fields in the order the onboarding flow asks for them
REQUIRED_FIELDS: Tuple[str, ...] = (
    "weight_kg",
    "height_cm",
    "age",
    "sex",
    "activity_level",
    "body_fat_percent",
    "goal_weight_kg",
    "days_to_complete",
    "goal",
)


class ProfileValidator:
    """Turn a ``ProfileDraft`` into a ``UserProfile``.

    Structural checks only: every required field present, numeric values
    positive, body fat within 0-100, sex and goal recognised. No
    physiological plausibility bounds are enforced here.

    Missing fields win over invalid ones, so the UI can prompt for what
    is absent before complaining about what is wrong. A profile whose
    values are each in range but whose Mifflin-St Jeor BMR is not positive
    is rejected under the ``"profile"`` key.
    """

    def __init__(self, bmr_service: Optional[BMRService] = None):
        self._bmr_service = bmr_service or BMRService()

    def missing_fields(self, draft: ProfileDraft) -> Tuple[str, ...]:
        """Identifiers of required fields still absent from the draft."""
        return tuple(name for name in REQUIRED_FIELDS if getattr(draft, name) is None)

    def coerce(self, draft: Union[ProfileDraft, Mapping[str, Any]]) -> ProfileDraft:
        """Build a draft from a raw mapping.

        Raises:
            InvalidRangeError: If a value cannot be read as its field type
        """
        if isinstance(draft, ProfileDraft):
            return draft
        try:
            return ProfileDraft.model_validate(dict(draft))
        except ValidationError as e:
            reasons: Dict[str, str] = {}
            for error in e.errors():
                loc = error["loc"][0] if error["loc"] else "profile"
                reasons[_field_name(str(loc))] = error["msg"]
            raise InvalidRangeError(reasons) from e

    def validate(self, draft: Union[ProfileDraft, Mapping[str, Any]]) -> UserProfile:
        """Validate a draft and return the complete profile.

        Raises:
            MissingFieldError: If any required field is absent
            InvalidRangeError: If any present field is out of range, or the
                profile gives a non-positive BMR
        """
        draft = self.coerce(draft)

        missing = self.missing_fields(draft)
        if missing:
            logger.debug("Profile incomplete", extra={"missing_fields": missing})
            raise MissingFieldError(missing)

        reasons: Dict[str, str] = {}
        sex = _parse_enum(Sex, draft.sex, "sex", reasons)
        goal = _parse_enum(Goal, draft.goal, "goal", reasons)
        activity_level = ActivityLevel.parse(draft.activity_level)

        if reasons:
            raise InvalidRangeError(reasons)

        # UserProfile raises InvalidRangeError for out-of-range values
        profile = UserProfile(
            weight_kg=draft.weight_kg,
            height_cm=draft.height_cm,
            age=draft.age,
            sex=sex,
            activity_level=activity_level,
            body_fat_percent=draft.body_fat_percent,
            goal=goal,
            goal_weight_kg=draft.goal_weight_kg,
            days_to_complete=draft.days_to_complete,
        )

        bmr = self._bmr_service.resting_energy(
            profile.weight_kg, profile.height_cm, profile.age, profile.sex
        )
        if bmr <= 0:
            raise InvalidRangeError(
                {
                    "profile": "weight, height and age give a non-positive "
                    f"basal metabolic rate ({bmr:.1f} kcal/day)"
                }
            )
        return profile


def _parse_enum(enum_cls, raw, field, reasons):
    try:
        return enum_cls.parse(raw)
    except ValueError as e:
        reasons[field] = str(e)
        return None


_ALIAS_TO_FIELD = {
    "weight": "weight_kg",
    "weightKg": "weight_kg",
    "height": "height_cm",
    "heightCm": "height_cm",
    "activityLevel": "activity_level",
    "bodyFatPercentage": "body_fat_percent",
    "bodyFatPercent": "body_fat_percent",
    "goalWeight": "goal_weight_kg",
    "goalWeightKg": "goal_weight_kg",
    "daysToComplete": "days_to_complete",
}


def _field_name(loc: str) -> str:
    return _ALIAS_TO_FIELD.get(loc, loc)
