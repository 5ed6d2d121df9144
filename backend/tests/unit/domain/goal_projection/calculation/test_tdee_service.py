"""Unit tests for TDEEService."""

import pytest

from domain.goal_projection.calculation.tdee_service import TDEEService
from domain.goal_projection.core.value_objects import ActivityLevel, BMR


class TestTDEEService:
    """Test TDEE calculation using the TDEE multiplier table."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = TDEEService()
        self.base_bmr = BMR(1800.0)

    @pytest.mark.parametrize(
        "activity, expected",
        [
            (ActivityLevel.SEDENTARY, 2160.0),
            (ActivityLevel.LIGHTLY_ACTIVE, 2475.0),
            (ActivityLevel.MODERATELY_ACTIVE, 2700.0),
            (ActivityLevel.ACTIVE, 3060.0),
            (ActivityLevel.VERY_ACTIVE, 3420.0),
        ],
    )
    def test_calculate_tdee_per_level(self, activity, expected):
        tdee = self.service.calculate(self.base_bmr, activity)

        assert tdee.value == pytest.approx(expected)

    def test_moderate_uses_1_5_not_1_55(self):
        assert self.service.multiplier(ActivityLevel.MODERATELY_ACTIVE) == 1.5

    def test_unknown_label_defaults_to_lightly_active(self):
        assert self.service.multiplier("Couch Potato") == 1.375
        assert self.service.multiplier(None) == 1.375

    def test_display_label_is_accepted(self):
        assert self.service.multiplier("Very Active") == 1.9
        assert self.service.multiplier("Extra Active") == 1.9
