"""PlanGenerator — builds the full session calendar from profile inputs."""

from __future__ import annotations

import logging
from datetime import date, timedelta

from plan_engine.math.periodization import (
    compute_total_weeks,
    date_for_day,
    is_recovery_week,
    plan_phase,
    quality_rotation,
    scaled_minutes,
)
from plan_engine.models.enums import (
    DEFAULT_EASY_MIN,
    DEFAULT_LONG_RUN_MIN,
    DEFAULT_QUALITY_MIN,
    EASY_RUN_FACTOR,
    RECOVERY_EASY_FACTOR,
    RECOVERY_LONG_RUN_FACTOR,
    RECOVERY_QUALITY_FACTOR,
    SessionType,
)
from plan_engine.models.profile import GenerateInput
from plan_engine.models.session import TrainingSession
from plan_engine.planner.day_classifier import DayClassification, classify_days
from plan_engine.workout_builder.builder import SessionBuilder

logger = logging.getLogger(__name__)


class PlanGenerator:
    """Generates a training calendar week by week.

    Usage::

        sessions = PlanGenerator().generate(generate_input)

    The generator is stateless and never reads the clock: the same input
    always yields the same sessions.
    """

    def generate(self, plan_input: GenerateInput) -> tuple[TrainingSession, ...]:
        """Generate every session from the start date up to race day.

        Algorithm:
        1. Classify days once: long-run day, up to two quality days, easy days.
        2. For each week index 0..total_weeks-1:
           a. phase = week / total_weeks; every 4th week is a recovery week.
           b. Long run on the long-run day (60% volume in recovery weeks).
           c. Quality sessions rotated by phase (70% in recovery weeks).
           d. Easy runs on the easy days (80% volume, 60% in recovery weeks).
        3. Skip any session dated outside [start_date, race_date].
        4. Sort by date.

        Args:
            plan_input: Dates, availability and thresholds.

        Returns:
            Sessions sorted ascending by date; empty when no day is available.
        """
        classification = classify_days(plan_input.availability)
        if classification.is_empty:
            logger.debug("No available training days; returning an empty plan")
            return ()

        total_weeks = compute_total_weeks(plan_input.start_date, plan_input.race_date)
        logger.debug("Week layout: %s", classification.describe())
        builder = SessionBuilder(
            threshold_pace=plan_input.resolved_threshold_pace,
            threshold_hr=plan_input.resolved_threshold_hr,
        )

        sessions: list[TrainingSession] = []
        for week in range(total_weeks):
            sessions.extend(
                self._build_week(plan_input, classification, builder, week, total_weeks)
            )

        sessions.sort(key=lambda s: s.session_date)
        logger.debug(
            "Generated %d sessions over %d weeks (%s to %s)",
            len(sessions),
            total_weeks,
            plan_input.start_date.isoformat(),
            plan_input.race_date.isoformat(),
        )
        return tuple(sessions)

    def _build_week(
        self,
        plan_input: GenerateInput,
        classification: DayClassification,
        builder: SessionBuilder,
        week: int,
        total_weeks: int,
    ) -> list[TrainingSession]:
        """Build one week's sessions in emission order: long, quality, easy."""
        week_start = plan_input.start_date + timedelta(days=7 * week)
        phase = plan_phase(week, total_weeks)
        recovery = is_recovery_week(week)
        availability = plan_input.availability
        sessions: list[TrainingSession] = []

        # --- Long run ---
        long_day = classification.long_run_day
        long_date = date_for_day(week_start, long_day)
        if self._in_window(long_date, plan_input):
            minutes = availability.minutes_for(long_day, DEFAULT_LONG_RUN_MIN)
            factor = RECOVERY_LONG_RUN_FACTOR if recovery else 1.0
            sessions.append(builder.build(
                SessionType.LONG, long_date, scaled_minutes(minutes, factor), phase=phase,
            ))

        # --- Quality sessions ---
        rotation = quality_rotation(phase)
        for i, day in enumerate(classification.quality_days):
            session_date = date_for_day(week_start, day)
            if not self._in_window(session_date, plan_input):
                continue
            minutes = availability.minutes_for(day, DEFAULT_QUALITY_MIN)
            factor = RECOVERY_QUALITY_FACTOR if recovery else 1.0
            sessions.append(builder.build(
                rotation[i % len(rotation)], session_date, scaled_minutes(minutes, factor),
            ))

        # --- Easy runs ---
        for day in classification.easy_days:
            session_date = date_for_day(week_start, day)
            if not self._in_window(session_date, plan_input):
                continue
            minutes = availability.minutes_for(day, DEFAULT_EASY_MIN)
            factor = RECOVERY_EASY_FACTOR if recovery else EASY_RUN_FACTOR
            sessions.append(builder.build(
                SessionType.EASY, session_date, scaled_minutes(minutes, factor),
            ))

        return sessions

    @staticmethod
    def _in_window(session_date: date, plan_input: GenerateInput) -> bool:
        return plan_input.start_date <= session_date <= plan_input.race_date


def generate_plan(plan_input: GenerateInput) -> tuple[TrainingSession, ...]:
    """Convenience wrapper around ``PlanGenerator().generate``."""
    return PlanGenerator().generate(plan_input)
