"""JSON interchange serialization (format tag ``spartan-trainer-v1``).

Every numeric field is written raw; durations and paces also get a display
string for readers. ``from_interchange_json`` reads the raw fields back,
so numbers survive a round trip exactly and only display strings are derived.
"""

from __future__ import annotations

import json
from datetime import date, datetime, timezone

from plan_engine.math.units import meters_to_display, sec_per_km_to_display, seconds_to_display
from plan_engine.models.enums import (
    EXPORT_FORMAT_TAG,
    DurationType,
    PrimaryTarget,
    SessionType,
    StepType,
)
from plan_engine.models.session import SessionStep, TrainingSession


def to_interchange_json(
    sessions: list[TrainingSession] | tuple[TrainingSession, ...],
    exported_at: datetime | None = None,
) -> dict:
    """Convert sessions to an interchange document.

    Args:
        sessions: Sessions with their steps, in the order to export.
        exported_at: Export timestamp; defaults to the current UTC time.
    """
    if exported_at is None:
        exported_at = datetime.now(timezone.utc)
    return {
        "exportedAt": _iso_timestamp(exported_at),
        "format": EXPORT_FORMAT_TAG,
        "sessions": [_convert_session(s) for s in sessions],
    }


def to_interchange_json_string(
    sessions: list[TrainingSession] | tuple[TrainingSession, ...],
    exported_at: datetime | None = None,
    indent: int = 2,
) -> str:
    return json.dumps(to_interchange_json(sessions, exported_at), indent=indent)


def from_interchange_json(document: dict | str) -> list[TrainingSession]:
    """Parse an interchange document back into sessions.

    Raises:
        ValueError: If the document carries a different format tag.
    """
    if isinstance(document, str):
        document = json.loads(document)
    if document.get("format") != EXPORT_FORMAT_TAG:
        raise ValueError(f"Unsupported export format: {document.get('format')!r}")
    return [_parse_session(raw) for raw in document.get("sessions", [])]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _iso_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a trailing Z."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment.isoformat(timespec="milliseconds") + "Z"


def _convert_session(session: TrainingSession) -> dict:
    return {
        "date": session.session_date.isoformat(),
        "title": session.title,
        "type": session.session_type.value,
        "primaryTarget": session.primary_target.value,
        "notes": session.notes,
        "steps": [_convert_step(st) for st in session.steps],
    }


def _convert_step(step: SessionStep) -> dict:
    if step.duration_type == DurationType.TIME:
        display = seconds_to_display(step.duration_value)
    else:
        display = meters_to_display(step.duration_value)

    pace_target = None
    if step.target_pace_low_sec_per_km:
        high = step.target_pace_high_sec_per_km
        pace_target = {
            "low": sec_per_km_to_display(step.target_pace_low_sec_per_km),
            "high": sec_per_km_to_display(high) if high else None,
            "lowSec": step.target_pace_low_sec_per_km,
            "highSec": high,
        }

    hr_target = None
    if step.target_hr_low_bpm:
        hr_target = {
            "low": step.target_hr_low_bpm,
            "high": step.target_hr_high_bpm,
        }

    return {
        "order": step.step_order,
        "type": step.step_type.value,
        "duration": {
            "type": step.duration_type.value,
            "value": step.duration_value,
            "display": display,
        },
        "paceTarget": pace_target,
        "hrTarget": hr_target,
        "notes": step.step_notes,
    }


def _parse_session(raw: dict) -> TrainingSession:
    return TrainingSession(
        session_date=date.fromisoformat(raw["date"]),
        title=raw["title"],
        session_type=SessionType(raw["type"]),
        primary_target=PrimaryTarget(raw["primaryTarget"]),
        notes=raw.get("notes"),
        steps=tuple(_parse_step(st) for st in raw.get("steps", [])),
    )


def _parse_step(raw: dict) -> SessionStep:
    duration = raw["duration"]
    pace = raw.get("paceTarget") or {}
    hr = raw.get("hrTarget") or {}
    return SessionStep(
        step_order=raw["order"],
        step_type=StepType(raw["type"]),
        duration_type=DurationType(duration["type"]),
        duration_value=duration["value"],
        target_pace_low_sec_per_km=pace.get("lowSec"),
        target_pace_high_sec_per_km=pace.get("highSec"),
        target_hr_low_bpm=hr.get("low"),
        target_hr_high_bpm=hr.get("high"),
        step_notes=raw.get("notes"),
    )
