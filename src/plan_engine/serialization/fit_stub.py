"""FIT-shaped JSON serialization for TrainingSession objects.

Produces one workout-definition record per session, laid out like FIT
workout and workout_step messages but encoded as JSON. It is a placeholder
for a binary encoder and makes no claim of byte-level FIT compliance.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json
import re

from plan_engine.math.units import round_half_up
from plan_engine.models.enums import DurationType, SessionType, StepType
from plan_engine.models.session import SessionStep, TrainingSession

# StepType -> FIT intensity. Warmup and cooldown share WARMUP.
_INTENSITY = {
    StepType.WARMUP: "WARMUP",
    StepType.COOLDOWN: "WARMUP",
    StepType.RECOVER: "REST",
    StepType.WORK: "ACTIVE",
}

# FIT scales: time in milliseconds, distance in centimeters.
_TIME_SCALE = 1000
_DISTANCE_SCALE = 100


def to_fit_stub(sessions: list[TrainingSession] | tuple[TrainingSession, ...]) -> list[dict]:
    """Convert sessions to a list of FIT-like workout dicts."""
    return [_convert_session(s) for s in sessions]


def to_fit_stub_string(
    sessions: list[TrainingSession] | tuple[TrainingSession, ...], indent: int = 2,
) -> str:
    return json.dumps(to_fit_stub(sessions), indent=indent)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _convert_session(session: TrainingSession) -> dict:
    title = re.sub(r"\s+", "_", session.title)
    return {
        "fileType": "WORKOUT",
        "workoutName": f"{session.session_date.isoformat()}_{title}",
        "sport": "RUNNING",
        "subSport": "TRACK" if session.session_type == SessionType.INTERVAL else "STREET",
        "numValidSteps": len(session.steps),
        "steps": [_convert_step(st) for st in session.steps],
    }


def _convert_step(step: SessionStep) -> dict:
    if step.duration_type == DurationType.TIME:
        duration_type = "TIME"
        duration_value = step.duration_value * _TIME_SCALE
    else:
        duration_type = "DISTANCE"
        duration_value = step.duration_value * _DISTANCE_SCALE

    result = {
        "messageIndex": step.step_order,
        "workoutStepName": step.step_notes or step.step_type.value,
        "durationType": duration_type,
        "durationValue": duration_value,
    }
    result.update(_build_target(step))
    result["intensity"] = _INTENSITY[step.step_type]
    return result


def _build_target(step: SessionStep) -> dict:
    """Build the target fields for a step.

    Priority: pace target > HR target > open.
    The slower pace (high s/km) becomes the low speed bound.
    """
    pace_low = step.target_pace_low_sec_per_km
    if pace_low:
        pace_high = step.target_pace_high_sec_per_km or pace_low
        return {
            "targetType": "SPEED",
            "targetValue": 0,
            "customTargetLow": pace_to_speed_units(pace_high),
            "customTargetHigh": pace_to_speed_units(pace_low),
        }

    if step.target_hr_low_bpm:
        return {
            "targetType": "HEART_RATE",
            "targetValue": 0,
            "customTargetLow": step.target_hr_low_bpm,
            "customTargetHigh": step.target_hr_high_bpm or 0,
        }

    return {
        "targetType": "OPEN",
        "targetValue": 0,
        "customTargetLow": 0,
        "customTargetHigh": 0,
    }


def pace_to_speed_units(s_per_km: float) -> int:
    """Convert pace in s/km to speed in mm/s.

    Example: 300 s/km (5:00/km) -> 3.333 m/s -> 3333
    """
    return round_half_up(1000 / s_per_km * 1000)
