"""Tests for plan horizon, phase and recovery-week math."""

from datetime import date

import pytest

from plan_engine.math.periodization import (
    compute_total_weeks,
    date_for_day,
    is_recovery_week,
    plan_phase,
    quality_rotation,
    scaled_minutes,
    week_monday,
)
from plan_engine.models.enums import SessionType


class TestTotalWeeks:
    @pytest.mark.parametrize("race, expected", [
        (date(2025, 1, 20), 2),
        (date(2025, 1, 26), 2),
        (date(2025, 1, 27), 3),
        (date(2025, 1, 8), 1),
        (date(2025, 1, 6), 1),
    ])
    def test_whole_weeks_minimum_one(self, race: date, expected: int) -> None:
        assert compute_total_weeks(date(2025, 1, 6), race) == expected

    def test_race_before_start_gives_one_week(self) -> None:
        assert compute_total_weeks(date(2025, 1, 6), date(2024, 12, 1)) == 1


class TestPhase:
    def test_phase_progression(self) -> None:
        assert plan_phase(0, 10) == 0.0
        assert plan_phase(5, 10) == 0.5
        assert plan_phase(9, 10) == 0.9

    @pytest.mark.parametrize("week, expected", [
        (0, False), (2, False), (3, True), (4, False), (7, True), (11, True),
    ])
    def test_every_fourth_week_recovers(self, week: int, expected: bool) -> None:
        assert is_recovery_week(week) is expected


class TestQualityRotation:
    def test_early_tempo_only(self) -> None:
        assert quality_rotation(0.0) == (SessionType.TEMPO,)
        assert quality_rotation(0.29) == (SessionType.TEMPO,)

    def test_middle_intervals_and_tempo(self) -> None:
        assert quality_rotation(0.3) == (SessionType.INTERVAL, SessionType.TEMPO)
        assert quality_rotation(0.69) == (SessionType.INTERVAL, SessionType.TEMPO)

    def test_late_intervals_and_race_sim(self) -> None:
        assert quality_rotation(0.7) == (SessionType.INTERVAL, SessionType.RACE_SIM)


class TestScaledMinutes:
    def test_full_factor_unchanged(self) -> None:
        assert scaled_minutes(45, 1.0) == 45

    def test_recovery_long_run(self) -> None:
        assert scaled_minutes(90, 0.6) == 54

    def test_easy_run_volume(self) -> None:
        assert scaled_minutes(40, 0.8) == 32
        assert scaled_minutes(35, 0.6) == 21


class TestCalendar:
    def test_week_monday(self) -> None:
        assert week_monday(date(2025, 1, 9)) == date(2025, 1, 6)
        assert week_monday(date(2025, 1, 6)) == date(2025, 1, 6)
        assert week_monday(date(2025, 1, 12)) == date(2025, 1, 6)

    def test_date_for_day_uses_monday_aligned_week(self) -> None:
        # Start on a Wednesday: Monday of that week is before the start.
        assert date_for_day(date(2025, 1, 8), "mon") == date(2025, 1, 6)
        assert date_for_day(date(2025, 1, 8), "sun") == date(2025, 1, 12)
