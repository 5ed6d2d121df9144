"""Unit tests for GoalStrategyService."""

import pytest

from domain.goal_projection.calculation.composition_service import (
    BodyCompositionService,
)
from domain.goal_projection.calculation.goal_strategy_service import (
    GoalStrategyService,
)
from domain.goal_projection.core.policy import fat_loss_ratio
from domain.goal_projection.core.value_objects import (
    ActivityLevel,
    Goal,
    GoalDirection,
    Sex,
    TDEE,
    WarningKind,
)


class TestSelectDirection:
    """Test branch selection over goal and weight delta."""

    def test_maintain_always_holds(self):
        assert GoalStrategyService.select_direction(Goal.MAINTAIN, -10.0) == (
            GoalDirection.HOLD,
            False,
        )

    def test_lose_with_lower_goal_weight(self):
        assert GoalStrategyService.select_direction(Goal.LOSE_WEIGHT, -5.0) == (
            GoalDirection.LOSS,
            False,
        )

    def test_gain_with_higher_goal_weight(self):
        assert GoalStrategyService.select_direction(Goal.GAIN_WEIGHT, 4.0) == (
            GoalDirection.GAIN,
            False,
        )

    def test_gain_goal_with_lower_goal_weight_follows_delta(self):
        assert GoalStrategyService.select_direction(Goal.GAIN_WEIGHT, -3.0) == (
            GoalDirection.LOSS,
            True,
        )

    def test_lose_goal_with_higher_goal_weight_follows_delta(self):
        assert GoalStrategyService.select_direction(Goal.LOSE_WEIGHT, 3.0) == (
            GoalDirection.GAIN,
            True,
        )

    def test_zero_delta_holds(self):
        assert GoalStrategyService.select_direction(Goal.LOSE_WEIGHT, 0.0) == (
            GoalDirection.HOLD,
            False,
        )


class TestFatLossRatio:
    @pytest.mark.parametrize(
        "weekly_loss, expected",
        [
            (0.25, 0.85),
            (0.5, 0.85),
            (0.6, 0.80),
            (0.75, 0.80),
            (0.9, 0.75),
            (1.0, 0.75),
            (1.01, 0.70),
            (3.0, 0.70),
        ],
    )
    def test_tiers(self, weekly_loss, expected):
        assert fat_loss_ratio(weekly_loss) == expected


class TestLossBranch:
    """Test the loss branch on the 80kg -> 75kg in 70 days scenario."""

    def setup_method(self):
        self.service = GoalStrategyService()
        self.composition_service = BodyCompositionService()

    def _plan(self, profile, tdee_value=2670.0):
        composition = self.composition_service.estimate(
            profile.weight_kg, profile.body_fat_percent
        )
        return self.service.plan(profile, TDEE(tdee_value), composition)

    def test_raw_target_and_rate(self, male_loss_profile):
        outcome = self._plan(male_loss_profile)

        # 5kg * 7700 / 70 days = 550 kcal/day
        assert outcome.direction is GoalDirection.LOSS
        assert outcome.daily_adjustment_kcal == pytest.approx(-550.0)
        assert outcome.raw_target_calories == pytest.approx(2120.0)
        assert outcome.requested_weekly_rate_kg == pytest.approx(-0.5)
        assert outcome.warnings == ()

    def test_projected_body_fat_uses_085_ratio(self, male_loss_profile):
        outcome = self._plan(male_loss_profile)

        # fat 16kg - 5kg * 0.85 = 11.75kg over 75kg
        assert outcome.expected_fat_change_kg == pytest.approx(-4.25)
        assert outcome.expected_lean_change_kg == pytest.approx(-0.75)
        assert outcome.projected_body_fat_percent == pytest.approx(11.75 / 75 * 100)

    def test_recommended_deficit_male(self, male_loss_profile):
        outcome = self._plan(male_loss_profile)

        # min(2670 * 0.22, 600)
        assert outcome.recommended_deficit_kcal == pytest.approx(587.4)

    def test_recommended_deficit_female_capped(self, make_profile):
        profile = make_profile(sex=Sex.FEMALE)

        outcome = self._plan(profile, tdee_value=2000.0)

        # min(2000 * 0.37, 660)
        assert outcome.recommended_deficit_kcal == 660.0

    def test_rapid_loss_and_aggressive_deficit(self, make_profile):
        profile = make_profile(goal_weight_kg=70.0, days_to_complete=28)

        outcome = self._plan(profile)

        # 10kg in 4 weeks: 2.5 kg/week, 2750 kcal/day deficit
        assert outcome.warnings == (
            WarningKind.RAPID_LOSS,
            WarningKind.AGGRESSIVE_DEFICIT,
        )

    def test_aggressive_deficit_without_rapid_loss(self, make_profile):
        profile = make_profile(goal_weight_kg=72.0, days_to_complete=56)

        outcome = self._plan(profile, tdee_value=2000.0)

        # 8kg in 8 weeks = 1.0 kg/week (not rapid), 1100/2000 = 55% deficit
        assert outcome.warnings == (WarningKind.AGGRESSIVE_DEFICIT,)

    def test_projected_body_fat_never_below_floor(self, make_profile):
        profile = make_profile(goal_weight_kg=0.5, days_to_complete=3650)

        outcome = self._plan(profile)

        assert outcome.projected_body_fat_percent == 5.0

    def test_projected_body_fat_capped_at_100(self, make_profile):
        profile = make_profile(
            body_fat_percent=90.0, goal_weight_kg=0.5, days_to_complete=3650
        )

        outcome = self._plan(profile)

        assert outcome.projected_body_fat_percent == 100.0


class TestGainBranch:
    def setup_method(self):
        self.service = GoalStrategyService()
        self.composition_service = BodyCompositionService()

    def _plan(self, profile, tdee_value=2802.875):
        composition = self.composition_service.estimate(
            profile.weight_kg, profile.body_fat_percent
        )
        return self.service.plan(profile, TDEE(tdee_value), composition)

    def test_slow_gain(self, make_profile):
        profile = make_profile(
            weight_kg=70.0,
            height_cm=175.0,
            activity_level=ActivityLevel.ACTIVE,
            body_fat_percent=15.0,
            goal=Goal.GAIN_WEIGHT,
            goal_weight_kg=74.0,
            days_to_complete=112,
        )

        outcome = self._plan(profile)

        # 4kg over 16 weeks = 0.25 kg/week -> 275 kcal/day surplus
        assert outcome.direction is GoalDirection.GAIN
        assert outcome.daily_adjustment_kcal == pytest.approx(275.0)
        assert outcome.raw_target_calories == pytest.approx(3077.875)
        assert outcome.expected_lean_change_kg == pytest.approx(3.0)
        assert outcome.expected_fat_change_kg == pytest.approx(1.0)
        assert outcome.projected_body_fat_percent == pytest.approx(11.5 / 74 * 100)
        assert outcome.recommended_deficit_kcal is None
        assert outcome.warnings == ()

    def test_rapid_gain_halves_muscle_share(self, make_profile):
        profile = make_profile(
            weight_kg=70.0,
            body_fat_percent=15.0,
            goal=Goal.GAIN_WEIGHT,
            goal_weight_kg=74.0,
            days_to_complete=28,
        )

        outcome = self._plan(profile)

        assert outcome.warnings == (WarningKind.RAPID_GAIN,)
        assert outcome.expected_lean_change_kg == pytest.approx(2.0)
        assert outcome.projected_body_fat_percent == pytest.approx(12.5 / 74 * 100)


class TestHoldBranch:
    def test_hold_eats_at_tdee(self, female_maintain_profile):
        service = GoalStrategyService()
        composition = BodyCompositionService().estimate(60.0, 25.0)

        outcome = service.plan(female_maintain_profile, TDEE(1614.3), composition)

        assert outcome.direction is GoalDirection.HOLD
        assert outcome.raw_target_calories == 1614.3
        assert outcome.requested_weekly_rate_kg == 0.0
        assert outcome.projected_body_fat_percent == 25.0
        assert outcome.warnings == ()

    def test_mismatch_warning_is_appended(self, make_profile):
        profile = make_profile(goal=Goal.GAIN_WEIGHT, goal_weight_kg=75.0)
        composition = BodyCompositionService().estimate(80.0, 20.0)

        outcome = GoalStrategyService().plan(profile, TDEE(2670.0), composition)

        assert outcome.direction is GoalDirection.LOSS
        assert outcome.warnings[-1] is WarningKind.GOAL_DIRECTION_MISMATCH
