"""Session titles, session notes and step cues."""

from __future__ import annotations

from plan_engine.math.units import format_hr_range, format_pace_range, seconds_to_display
from plan_engine.models.enums import (
    INTERVAL_WORK_S,
    LONG_RUN_TEMPO_PHASE,
    PrimaryTarget,
    SessionType,
    StepType,
)
from plan_engine.workout_builder.target_assigner import PaceHRTargets

SESSION_TITLES: dict[SessionType, str] = {
    SessionType.EASY: "Easy Run",
    SessionType.LONG: "Long Run",
    SessionType.TEMPO: "Tempo Run",
    SessionType.RACE_SIM: "Race Simulation",
    SessionType.RECOVERY: "Recovery Run",
    SessionType.STRENGTH: "Strength",
}

SESSION_TYPE_LABELS: dict[SessionType, str] = {
    SessionType.EASY: "Easy Run",
    SessionType.INTERVAL: "Intervals",
    SessionType.TEMPO: "Tempo",
    SessionType.LONG: "Long Run",
    SessionType.RECOVERY: "Recovery",
    SessionType.RACE_SIM: "Race Sim",
    SessionType.STRENGTH: "Strength",
}

_SESSION_NOTES: dict[SessionType, str] = {
    SessionType.EASY: "Keep it conversational. Zone 2 effort.",
    SessionType.TEMPO: "Comfortably hard. Zone 3-4 effort.",
    SessionType.INTERVAL: "Hard intervals with jog recovery. Push Zone 4-5.",
    SessionType.RACE_SIM: "Practice race pace and nutrition strategy.",
}

# Step cues keyed by (session type, step type); None = any session type.
_STEP_CUES: dict[tuple[SessionType | None, StepType], str] = {
    (SessionType.EASY, StepType.WARMUP): "Easy warmup",
    (SessionType.EASY, StepType.WORK): "Easy pace, Zone 2",
    (SessionType.EASY, StepType.COOLDOWN): "Walk/easy jog",
    (SessionType.LONG, StepType.WARMUP): "Easy warmup",
    (SessionType.LONG, StepType.WORK): "Steady, Zone 2",
    (SessionType.LONG, StepType.COOLDOWN): "Easy cooldown",
    (SessionType.TEMPO, StepType.WARMUP): "Easy warmup with strides",
    (SessionType.INTERVAL, StepType.WARMUP): "Easy warmup with 4 strides",
    (SessionType.RACE_SIM, StepType.WARMUP): "Easy warmup",
    (None, StepType.RECOVER): "Easy jog recovery",
    (None, StepType.COOLDOWN): "Cool down",
}

TEMPO_TRANSITION_CUE = "Easy transition"
TEMPO_WORK_CUE = "Tempo effort"
RACE_SIM_SEGMENT_CUES = ("Easy start", "Race pace", "Push finish")


def step_cue(session_type: SessionType, step_type: StepType) -> str | None:
    """Look up the cue for a step, falling back to the generic cue."""
    cue = _STEP_CUES.get((session_type, step_type))
    if cue is None:
        cue = _STEP_CUES.get((None, step_type))
    return cue


def rep_cue(rep: int, reps: int) -> str:
    """Label for the ``rep``-th (1-indexed) work bout of ``reps``."""
    return f"Rep {rep}/{reps}"


def session_title(session_type: SessionType, reps: int | None = None) -> str:
    """Display title; interval sessions embed their rep structure."""
    if session_type == SessionType.INTERVAL:
        return f"{reps}x{INTERVAL_WORK_S // 60}min Intervals"
    return SESSION_TITLES[session_type]


def session_notes(
    session_type: SessionType,
    primary_target: PrimaryTarget,
    main_targets: PaceHRTargets,
    phase: float = 0.0,
    main_duration_s: int | None = None,
) -> str:
    """Coaching notes for a session, ending with its main-set target.

    Args:
        session_type: The session being described.
        primary_target: Which target the athlete follows.
        main_targets: Targets of the defining work step.
        phase: Plan progress (0..1); only the long run reads it.
        main_duration_s: Work duration to mention, if any.
    """
    if session_type == SessionType.LONG:
        if phase > LONG_RUN_TEMPO_PHASE:
            base = "Build endurance. Include some tempo segments in the last third."
        else:
            base = "Build endurance. Stay in Zone 2 throughout."
    else:
        base = _SESSION_NOTES.get(session_type, "")

    if primary_target == PrimaryTarget.HR:
        target = format_hr_range(main_targets.hr_target_low, main_targets.hr_target_high)
    else:
        target = format_pace_range(main_targets.pace_target_low, main_targets.pace_target_high)
    if target == "--":
        return base

    if main_duration_s:
        return f"{base} Main set {seconds_to_display(main_duration_s)} at {target}."
    return f"{base} Target {target}."
