"""Training session models — one shape for generated and stored sessions.

A freshly generated session has no ``id``; the store assigns identities
(and ``plan_id`` / ``session_id``) when it persists the record.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from plan_engine.models.enums import DurationType, PrimaryTarget, SessionType, StepType


@dataclass(frozen=True)
class SessionStep:
    """A single step within a session.

    ``duration_value`` is seconds for TIME steps and meters for DISTANCE steps.
    Pace targets are in seconds per km (low = faster). HR targets are in bpm.
    In practice a step carries a pace target, an HR target or neither.
    """

    step_order: int
    step_type: StepType
    duration_type: DurationType = DurationType.TIME
    duration_value: int = 0
    target_pace_low_sec_per_km: float | None = None
    target_pace_high_sec_per_km: float | None = None
    target_hr_low_bpm: int | None = None
    target_hr_high_bpm: int | None = None
    step_notes: str | None = None
    id: str | None = None
    session_id: str | None = None

    @property
    def has_pace_target(self) -> bool:
        return self.target_pace_low_sec_per_km is not None

    @property
    def has_hr_target(self) -> bool:
        return self.target_hr_low_bpm is not None


@dataclass(frozen=True)
class TrainingSession:
    """A calendarized workout with its ordered steps."""

    session_date: date
    title: str
    session_type: SessionType
    primary_target: PrimaryTarget
    notes: str | None = None
    steps: tuple[SessionStep, ...] = field(default_factory=tuple)
    id: str | None = None
    plan_id: str | None = None
    completed: bool = False

    @property
    def total_duration_s(self) -> int:
        """Sum of all timed steps in seconds."""
        return sum(
            s.duration_value for s in self.steps
            if s.duration_type == DurationType.TIME
        )


@dataclass(frozen=True)
class Plan:
    """A stored plan grouping sessions under a date range."""

    id: str
    plan_name: str
    start_date: date
    end_date: date
    status: str = "active"
    athlete_profile_id: str | None = None
    availability_profile_id: str | None = None
    training_goal_id: str | None = None
