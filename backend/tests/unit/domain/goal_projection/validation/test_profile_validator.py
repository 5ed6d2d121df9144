"""Unit tests for ProfileValidator."""

import pytest

from domain.goal_projection.core.exceptions import (
    InvalidRangeError,
    MissingFieldError,
    ProfileValidationError,
)
from domain.goal_projection.core.value_objects import (
    ActivityLevel,
    Goal,
    ProfileDraft,
    Sex,
)
from domain.goal_projection.validation import REQUIRED_FIELDS, ProfileValidator


class TestProfileValidator:
    """Test draft to profile conversion."""

    def setup_method(self):
        self.validator = ProfileValidator()

    def test_complete_document_validates(self, onboarding_document):
        profile = self.validator.validate(onboarding_document)

        assert profile.weight_kg == 80.0
        assert profile.sex is Sex.MALE
        assert profile.activity_level is ActivityLevel.MODERATELY_ACTIVE
        assert profile.goal is Goal.LOSE_WEIGHT
        assert profile.days_to_complete == 70

    def test_accepts_draft_model(self, onboarding_document):
        draft = ProfileDraft.model_validate(onboarding_document)

        assert self.validator.validate(draft).goal_weight_kg == 75.0

    def test_missing_age(self, onboarding_document):
        del onboarding_document["age"]

        with pytest.raises(MissingFieldError) as exc:
            self.validator.validate(onboarding_document)

        assert exc.value.fields == ("age",)
        assert "age" in str(exc.value)

    def test_empty_draft_lists_all_fields_in_order(self):
        with pytest.raises(MissingFieldError) as exc:
            self.validator.validate(ProfileDraft())

        assert exc.value.fields == REQUIRED_FIELDS
        assert len(exc.value.fields) == 9

    def test_blank_text_counts_as_missing(self, onboarding_document):
        onboarding_document["sex"] = "  "

        with pytest.raises(MissingFieldError) as exc:
            self.validator.validate(onboarding_document)

        assert exc.value.fields == ("sex",)

    def test_missing_wins_over_invalid(self, onboarding_document):
        del onboarding_document["goalWeight"]
        onboarding_document["sex"] = "X"
        onboarding_document["weight"] = -1

        with pytest.raises(MissingFieldError) as exc:
            self.validator.validate(onboarding_document)

        assert exc.value.fields == ("goal_weight_kg",)

    @pytest.mark.parametrize(
        "key, value, field",
        [
            ("weight", -1, "weight_kg"),
            ("height", 0, "height_cm"),
            ("age", 0, "age"),
            ("bodyFatPercentage", 101, "body_fat_percent"),
            ("bodyFatPercentage", -0.5, "body_fat_percent"),
            ("goalWeight", 0, "goal_weight_kg"),
            ("daysToComplete", -7, "days_to_complete"),
            ("sex", "X", "sex"),
            ("goal", "shred", "goal"),
        ],
    )
    def test_out_of_range(self, onboarding_document, key, value, field):
        onboarding_document[key] = value

        with pytest.raises(InvalidRangeError) as exc:
            self.validator.validate(onboarding_document)

        assert exc.value.fields == (field,)
        assert field in exc.value.reasons

    def test_non_numeric_value_reported_by_field_name(self, onboarding_document):
        onboarding_document["weight"] = "heavy"

        with pytest.raises(InvalidRangeError) as exc:
            self.validator.validate(onboarding_document)

        assert exc.value.fields == ("weight_kg",)

    def test_boundary_body_fat_accepted(self, onboarding_document):
        onboarding_document["bodyFatPercentage"] = 0

        assert self.validator.validate(onboarding_document).body_fat_percent == 0.0

    def test_unknown_activity_defaults(self, onboarding_document):
        onboarding_document["activityLevel"] = "Couch Potato"

        profile = self.validator.validate(onboarding_document)

        assert profile.activity_level is ActivityLevel.LIGHTLY_ACTIVE

    def test_errors_share_base_class(self):
        with pytest.raises(ProfileValidationError):
            self.validator.validate({})

    def test_missing_fields_on_partial_draft(self):
        draft = ProfileDraft(weight_kg=80.0, height_cm=180.0, age=30)

        assert self.validator.missing_fields(draft) == REQUIRED_FIELDS[3:]

    def test_non_positive_bmr_rejected(self, onboarding_document):
        onboarding_document.update(
            {"weight": 2, "height": 40, "age": 90, "sex": "Female", "goalWeight": 1}
        )

        with pytest.raises(InvalidRangeError) as exc:
            self.validator.validate(onboarding_document)

        assert exc.value.fields == ("profile",)
        assert "-341.0" in exc.value.reasons["profile"]

    def test_smallest_positive_bmr_accepted(self, onboarding_document):
        # 10*2 + 6.25*40 - 5*21 - 161 = 4 kcal/day
        onboarding_document.update(
            {"weight": 2, "height": 40, "age": 21, "sex": "Female", "goalWeight": 1}
        )

        assert self.validator.validate(onboarding_document).age == 21
