"""Generation inputs: athlete physiology, weekly availability and the race goal."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from plan_engine.models.enums import (
    DAY_KEYS,
    DEFAULT_THRESHOLD_HR_BPM,
    DEFAULT_THRESHOLD_PACE_S_PER_KM,
)


@dataclass(frozen=True)
class AthleteProfile:
    """Threshold physiology. Either value may be missing."""

    threshold_pace_sec_per_km: float | None = None
    threshold_hr_bpm: int | None = None


@dataclass(frozen=True)
class AvailabilityProfile:
    """Which days the athlete can train and for how long.

    Day keys are the lowercase three-letter names in ``DAY_KEYS``.
    """

    days_available: dict[str, bool] = field(default_factory=dict)
    max_minutes_by_day: dict[str, int] = field(default_factory=dict)
    preferred_long_run_day: str = "sat"
    weekend_long_run_avoid: bool = False

    @property
    def available_days(self) -> tuple[str, ...]:
        """Available days in canonical Monday-first order."""
        return tuple(day for day in DAY_KEYS if self.days_available.get(day))

    def minutes_for(self, day: str, default: int) -> int:
        """Minute budget for ``day``; a missing or zero budget falls back to ``default``."""
        return self.max_minutes_by_day.get(day) or default


@dataclass(frozen=True)
class TrainingGoal:
    race_date: date


@dataclass(frozen=True)
class GenerateInput:
    """Everything the plan generator needs for a single run.

    ``start_date`` is always explicit; the generator never reads the clock.
    """

    start_date: date
    race_date: date
    days_available: dict[str, bool] = field(default_factory=dict)
    max_minutes: dict[str, int] = field(default_factory=dict)
    preferred_long_run_day: str = "sat"
    weekend_long_run_avoid: bool = False
    threshold_pace_sec_per_km: float | None = None
    threshold_hr_bpm: int | None = None

    @classmethod
    def from_profiles(
        cls,
        start_date: date,
        athlete: AthleteProfile,
        availability: AvailabilityProfile,
        goal: TrainingGoal,
    ) -> GenerateInput:
        return cls(
            start_date=start_date,
            race_date=goal.race_date,
            days_available=dict(availability.days_available),
            max_minutes=dict(availability.max_minutes_by_day),
            preferred_long_run_day=availability.preferred_long_run_day,
            weekend_long_run_avoid=availability.weekend_long_run_avoid,
            threshold_pace_sec_per_km=athlete.threshold_pace_sec_per_km,
            threshold_hr_bpm=athlete.threshold_hr_bpm,
        )

    @property
    def availability(self) -> AvailabilityProfile:
        return AvailabilityProfile(
            days_available=self.days_available,
            max_minutes_by_day=self.max_minutes,
            preferred_long_run_day=self.preferred_long_run_day,
            weekend_long_run_avoid=self.weekend_long_run_avoid,
        )

    @property
    def resolved_threshold_pace(self) -> float:
        """Threshold pace in s/km, defaulting to 5:30/km when missing or zero."""
        return self.threshold_pace_sec_per_km or DEFAULT_THRESHOLD_PACE_S_PER_KM

    @property
    def resolved_threshold_hr(self) -> int:
        return self.threshold_hr_bpm or DEFAULT_THRESHOLD_HR_BPM
