"""Shared test fixtures: availability layouts, generation inputs, a temp store."""

from __future__ import annotations

from datetime import date

import pytest

from plan_engine.models.profile import (
    AthleteProfile,
    AvailabilityProfile,
    GenerateInput,
    TrainingGoal,
)
from plan_store.store import JsonPlanStore

MONDAY = date(2025, 1, 6)


@pytest.fixture
def three_day_availability() -> AvailabilityProfile:
    """Mon/Wed 45 min, Fri 90 min long run; weekend long runs avoided."""
    return AvailabilityProfile(
        days_available={
            "mon": True, "tue": False, "wed": True, "thu": False,
            "fri": True, "sat": False, "sun": False,
        },
        max_minutes_by_day={"mon": 45, "wed": 45, "fri": 90},
        preferred_long_run_day="fri",
        weekend_long_run_avoid=True,
    )


@pytest.fixture
def full_week_availability() -> AvailabilityProfile:
    """Five-day runner: two 60 min quality slots, short easy days, Saturday long run."""
    return AvailabilityProfile(
        days_available={
            "mon": False, "tue": True, "wed": True, "thu": True,
            "fri": False, "sat": True, "sun": True,
        },
        max_minutes_by_day={"tue": 60, "wed": 30, "thu": 60, "sat": 120, "sun": 40},
        preferred_long_run_day="sat",
    )


@pytest.fixture
def athlete() -> AthleteProfile:
    """Threshold 5:30/km and 165 bpm (the defaults, set explicitly)."""
    return AthleteProfile(threshold_pace_sec_per_km=330, threshold_hr_bpm=165)


@pytest.fixture
def two_week_input(three_day_availability: AvailabilityProfile) -> GenerateInput:
    """Two-week plan starting Monday 2025-01-06, race Monday 2025-01-20."""
    return GenerateInput.from_profiles(
        MONDAY,
        AthleteProfile(),
        three_day_availability,
        TrainingGoal(race_date=date(2025, 1, 20)),
    )


@pytest.fixture
def twelve_week_input(
    athlete: AthleteProfile, full_week_availability: AvailabilityProfile,
) -> GenerateInput:
    return GenerateInput.from_profiles(
        MONDAY,
        athlete,
        full_week_availability,
        TrainingGoal(race_date=date(2025, 3, 31)),
    )


@pytest.fixture
def store(tmp_path) -> JsonPlanStore:
    return JsonPlanStore(tmp_path / "store.json")


@pytest.fixture
def profiled_store(
    store: JsonPlanStore,
    athlete: AthleteProfile,
    three_day_availability: AvailabilityProfile,
) -> JsonPlanStore:
    """Store with every profile saved for user ``u1`` (race 2025-02-10)."""
    store.save_athlete_profile("u1", athlete)
    store.save_availability_profile("u1", three_day_availability)
    store.save_training_goal("u1", TrainingGoal(race_date=date(2025, 2, 10)))
    return store
