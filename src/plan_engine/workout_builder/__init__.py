"""Workout builder — turns minute budgets into structured sessions."""

from plan_engine.workout_builder.builder import (
    SessionBuilder,
    build_easy_run,
    build_intervals,
    build_long_run,
    build_race_simulation,
    build_tempo,
)

__all__ = [
    "SessionBuilder",
    "build_easy_run",
    "build_intervals",
    "build_long_run",
    "build_race_simulation",
    "build_tempo",
]
