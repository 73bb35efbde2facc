"""Splits available days into long-run, quality and easy days."""

from __future__ import annotations

from dataclasses import dataclass, field

from plan_engine.models.enums import (
    DAY_LABELS,
    DEFAULT_QUALITY_MIN,
    MAX_QUALITY_DAYS,
    QUALITY_DAY_MIN_MINUTES,
    WEEKEND_DAYS,
)
from plan_engine.models.profile import AvailabilityProfile


@dataclass(frozen=True)
class DayClassification:
    """Weekly slot layout. All day tuples are in canonical Monday-first order."""

    long_run_day: str | None = None
    quality_days: tuple[str, ...] = field(default_factory=tuple)
    easy_days: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return self.long_run_day is None

    def describe(self) -> str:
        """Readable layout, e.g. "long Saturday; quality Tuesday, Thursday; easy Sunday"."""
        if self.is_empty:
            return "no available days"
        quality = ", ".join(DAY_LABELS[d] for d in self.quality_days) or "none"
        easy = ", ".join(DAY_LABELS[d] for d in self.easy_days) or "none"
        return f"long {DAY_LABELS[self.long_run_day]}; quality {quality}; easy {easy}"


def _pick_long_run_day(
    available: tuple[str, ...], preferred: str, weekend_avoid: bool,
) -> str:
    long_run_day = preferred if preferred in available else available[-1]
    if weekend_avoid and long_run_day in WEEKEND_DAYS:
        weekdays = [day for day in available if day not in WEEKEND_DAYS]
        # Best effort: a weekend-only week keeps its weekend long run.
        if weekdays:
            long_run_day = weekdays[-1]
    return long_run_day


def classify_days(availability: AvailabilityProfile) -> DayClassification:
    """Classify the athlete's available days.

    Algorithm:
    1. Collect available days in canonical order; none -> empty result.
    2. Long-run day = preferred day if available, else the last available day.
    3. With weekend avoidance, a Saturday/Sunday long run moves to the last
       available weekday, if there is one.
    4. Remaining days, first come first served: the first two with at least
       45 minutes become quality days, the rest easy days. A missing or zero
       budget counts as 45 minutes.

    Args:
        availability: The athlete's availability profile.

    Returns:
        DayClassification; ``is_empty`` when no day is available.
    """
    available = availability.available_days
    if not available:
        return DayClassification()

    long_run_day = _pick_long_run_day(
        available,
        availability.preferred_long_run_day,
        availability.weekend_long_run_avoid,
    )

    quality_days: list[str] = []
    easy_days: list[str] = []
    for day in available:
        if day == long_run_day:
            continue
        minutes = availability.minutes_for(day, DEFAULT_QUALITY_MIN)
        if minutes >= QUALITY_DAY_MIN_MINUTES and len(quality_days) < MAX_QUALITY_DAYS:
            quality_days.append(day)
        else:
            easy_days.append(day)

    return DayClassification(
        long_run_day=long_run_day,
        quality_days=tuple(quality_days),
        easy_days=tuple(easy_days),
    )
