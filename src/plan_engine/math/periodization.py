"""Periodization math: plan horizon, phase, recovery weeks, quality rotation.

The plan is a flat sequence of weeks. Progress through the horizon
(``phase``, 0 at the start and approaching 1 near the race) selects the
quality-session mix, and every 4th week is a reduced-volume recovery week.
"""

from __future__ import annotations

from datetime import date, timedelta

from plan_engine.math.units import round_half_up
from plan_engine.models.enums import (
    DAY_KEYS,
    EARLY_PHASE_END,
    MID_PHASE_END,
    RECOVERY_WEEK_CYCLE,
    SessionType,
)


def compute_total_weeks(start_date: date, race_date: date) -> int:
    """Number of whole weeks between start and race, never less than 1.

    Partial weeks are truncated toward zero, so a race date before the
    start date still yields a single-week horizon.
    """
    delta_days = (race_date - start_date).days
    weeks = int(delta_days / 7)
    return max(1, weeks)


def plan_phase(week: int, total_weeks: int) -> float:
    """Normalized progress through the plan for a 0-indexed week."""
    return week / total_weeks


def is_recovery_week(week: int) -> bool:
    """True for 0-indexed weeks 3, 7, 11, ... (the 4th, 8th, 12th week)."""
    return week % RECOVERY_WEEK_CYCLE == RECOVERY_WEEK_CYCLE - 1


def quality_rotation(phase: float) -> tuple[SessionType, ...]:
    """Quality session types to rotate through for a given plan phase.

    Early plan: tempo only. Middle: intervals and tempo alternating.
    Late: intervals and race simulations alternating.
    """
    if phase < EARLY_PHASE_END:
        return (SessionType.TEMPO,)
    if phase < MID_PHASE_END:
        return (SessionType.INTERVAL, SessionType.TEMPO)
    return (SessionType.INTERVAL, SessionType.RACE_SIM)


def scaled_minutes(minutes: int, factor: float) -> int:
    """Scale a minute budget and round to whole minutes."""
    if factor == 1.0:
        return minutes
    return round_half_up(minutes * factor)


def week_monday(day: date) -> date:
    """Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


def date_for_day(week_start: date, day_key: str) -> date:
    """Date of ``day_key`` in the Monday-first week containing ``week_start``."""
    return week_monday(week_start) + timedelta(days=DAY_KEYS.index(day_key))
