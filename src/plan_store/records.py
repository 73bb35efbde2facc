"""Record mapping between stored rows and plan engine models.

Row field names are the persisted vocabulary (``session_date``,
``step_order``, ``target_pace_low_sec_per_km``, ...) and must not change:
stored data and exports written by earlier versions depend on them.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from plan_engine.models.enums import DAY_KEYS, DurationType, PrimaryTarget, SessionType, StepType
from plan_engine.models.profile import AthleteProfile, AvailabilityProfile, TrainingGoal
from plan_engine.models.session import Plan, SessionStep, TrainingSession

SESSION_FIELDS = (
    "id",
    "plan_id",
    "session_date",
    "title",
    "session_type",
    "primary_target",
    "notes",
    "completed",
)

STEP_FIELDS = (
    "id",
    "session_id",
    "step_order",
    "step_type",
    "duration_type",
    "duration_value",
    "target_pace_low_sec_per_km",
    "target_pace_high_sec_per_km",
    "target_hr_low_bpm",
    "target_hr_high_bpm",
    "step_notes",
)

# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------


def athlete_from_record(row: dict[str, Any]) -> AthleteProfile:
    return AthleteProfile(
        threshold_pace_sec_per_km=row.get("threshold_pace_sec_per_km"),
        threshold_hr_bpm=row.get("threshold_hr"),
    )


def athlete_to_record(profile: AthleteProfile) -> dict[str, Any]:
    return {
        "threshold_pace_sec_per_km": profile.threshold_pace_sec_per_km,
        "threshold_hr": profile.threshold_hr_bpm,
    }


def availability_from_record(row: dict[str, Any]) -> AvailabilityProfile:
    """Map an availability row; unknown day keys are dropped."""
    days = row.get("days_available_json") or {}
    minutes = row.get("max_minutes_by_day_json") or {}
    return AvailabilityProfile(
        days_available={k: bool(v) for k, v in days.items() if k in DAY_KEYS},
        max_minutes_by_day={k: int(v) for k, v in minutes.items() if k in DAY_KEYS and v is not None},
        preferred_long_run_day=row.get("preferred_long_run_day", "sat"),
        weekend_long_run_avoid=bool(row.get("weekend_long_run_avoid", False)),
    )


def availability_to_record(profile: AvailabilityProfile) -> dict[str, Any]:
    return {
        "days_available_json": dict(profile.days_available),
        "max_minutes_by_day_json": dict(profile.max_minutes_by_day),
        "preferred_long_run_day": profile.preferred_long_run_day,
        "weekend_long_run_avoid": profile.weekend_long_run_avoid,
    }


def goal_from_record(row: dict[str, Any]) -> TrainingGoal:
    return TrainingGoal(race_date=date.fromisoformat(row["race_date"]))


def goal_to_record(goal: TrainingGoal) -> dict[str, Any]:
    return {"race_date": goal.race_date.isoformat()}


# ---------------------------------------------------------------------------
# Plans, sessions and steps
# ---------------------------------------------------------------------------


def plan_from_record(row: dict[str, Any]) -> Plan:
    return Plan(
        id=row["id"],
        plan_name=row["plan_name"],
        start_date=date.fromisoformat(row["start_date"]),
        end_date=date.fromisoformat(row["end_date"]),
        status=row.get("status", "active"),
        athlete_profile_id=row.get("athlete_profile_id"),
        availability_profile_id=row.get("availability_profile_id"),
        training_goal_id=row.get("training_goal_id"),
    )


def session_to_record(session: TrainingSession, plan_id: str, session_id: str) -> dict[str, Any]:
    """Stored row for a session. Steps are stored separately."""
    return {
        "id": session_id,
        "plan_id": plan_id,
        "session_date": session.session_date.isoformat(),
        "title": session.title,
        "session_type": session.session_type.value,
        "primary_target": session.primary_target.value,
        "notes": session.notes,
        "completed": session.completed,
    }


def step_to_record(step: SessionStep, session_id: str, step_id: str) -> dict[str, Any]:
    return {
        "id": step_id,
        "session_id": session_id,
        "step_order": step.step_order,
        "step_type": step.step_type.value,
        "duration_type": step.duration_type.value,
        "duration_value": step.duration_value,
        "target_pace_low_sec_per_km": step.target_pace_low_sec_per_km,
        "target_pace_high_sec_per_km": step.target_pace_high_sec_per_km,
        "target_hr_low_bpm": step.target_hr_low_bpm,
        "target_hr_high_bpm": step.target_hr_high_bpm,
        "step_notes": step.step_notes,
    }


def step_from_record(row: dict[str, Any]) -> SessionStep:
    return SessionStep(
        step_order=row["step_order"],
        step_type=StepType(row["step_type"]),
        duration_type=DurationType(row.get("duration_type", DurationType.TIME.value)),
        duration_value=row.get("duration_value", 0),
        target_pace_low_sec_per_km=row.get("target_pace_low_sec_per_km"),
        target_pace_high_sec_per_km=row.get("target_pace_high_sec_per_km"),
        target_hr_low_bpm=row.get("target_hr_low_bpm"),
        target_hr_high_bpm=row.get("target_hr_high_bpm"),
        step_notes=row.get("step_notes"),
        id=row.get("id"),
        session_id=row.get("session_id"),
    )


def session_from_record(
    row: dict[str, Any], step_rows: list[dict[str, Any]] | None = None,
) -> TrainingSession:
    """Rebuild a session; its steps are ordered by ``step_order``."""
    steps = sorted(step_rows or [], key=lambda r: r["step_order"])
    return TrainingSession(
        session_date=date.fromisoformat(row["session_date"]),
        title=row.get("title", ""),
        session_type=SessionType(row.get("session_type", SessionType.EASY.value)),
        primary_target=PrimaryTarget(row.get("primary_target", PrimaryTarget.PACE.value)),
        notes=row.get("notes"),
        steps=tuple(step_from_record(r) for r in steps),
        id=row.get("id"),
        plan_id=row.get("plan_id"),
        completed=bool(row.get("completed", False)),
    )
