"""ProfileDraft - in-progress onboarding profile with optional fields."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class ProfileDraft(BaseModel):
    """
    Profile as edited during onboarding.

    Every field is optional: the onboarding flow fills them step by step
    and previews the plan whenever a step completes. ``ProfileValidator``
    is the only way to turn a draft into a ``UserProfile``.

    Field names accept both snake_case and the camelCase keys stored on the
    user document (``weight``, ``bodyFatPercentage``, ``goalWeight``...).
    Enum-like fields stay raw strings here; parsing them is a validation
    concern.

    Example:
        >>> draft = ProfileDraft.model_validate({"weight": 80, "age": 30})
        >>> draft.weight_kg
        80.0
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    weight_kg: Optional[float] = Field(
        default=None,
        allow_inf_nan=False,
        validation_alias=AliasChoices("weight_kg", "weight", "weightKg"),
    )
    height_cm: Optional[float] = Field(
        default=None,
        allow_inf_nan=False,
        validation_alias=AliasChoices("height_cm", "height", "heightCm"),
    )
    age: Optional[int] = None
    sex: Optional[str] = None
    activity_level: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("activity_level", "activityLevel"),
    )
    body_fat_percent: Optional[float] = Field(
        default=None,
        allow_inf_nan=False,
        validation_alias=AliasChoices(
            "body_fat_percent", "bodyFatPercentage", "bodyFatPercent"
        ),
    )
    goal: Optional[str] = None
    goal_weight_kg: Optional[float] = Field(
        default=None,
        allow_inf_nan=False,
        validation_alias=AliasChoices("goal_weight_kg", "goalWeight", "goalWeightKg"),
    )
    days_to_complete: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("days_to_complete", "daysToComplete"),
    )

    @field_validator("sex", "activity_level", "goal", mode="before")
    @classmethod
    def enum_to_text(cls, v: Any) -> Any:
        """Accept enum members as well as plain text."""
        if v is None:
            return v
        value = getattr(v, "value", v)
        text = str(value).strip()
        return text or None

    def merged(self, changes: Mapping[str, Any]) -> ProfileDraft:
        """Return a new draft with ``changes`` applied on top of this one."""
        data = self.model_dump()
        data.update(ProfileDraft.model_validate(changes).model_dump(exclude_none=True))
        return ProfileDraft.model_validate(data)
