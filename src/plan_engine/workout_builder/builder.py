"""Session builders — turn a day's minute budget into a structured session.

Each builder takes ``(session_date, minutes, threshold_pace, threshold_hr)``
and returns a TrainingSession whose steps are numbered from 0. Durations are
rounded to whole seconds; main-set durations never go below zero.

Structure per session type:

* Easy: proportional warmup/cooldown (15% each, capped at 5 min) around
  a Zone 2 run.
* Long: 10 min warmup | steady aerobic run | 10 min cooldown.
* Tempo: 10 min warmup | easy transition | tempo block (70% of the main
  set) | 5 min cooldown.
* Intervals: 10 min warmup | N x 2 min hard with jog recoveries | 5 min
  cooldown, N from the time available.
* Race simulation: 10 min warmup | 40% easy start, 40% race pace, 20%
  push finish | 5 min cooldown.
"""

from __future__ import annotations

from datetime import date

from plan_engine.math.units import round_half_up
from plan_engine.models.enums import (
    DurationType,
    EASY_WARMUP_CAP_S,
    EASY_WARMUP_FRACTION,
    INTERVAL_MAX_REPS,
    INTERVAL_MIN_RECOVERY_S,
    INTERVAL_MIN_REPS,
    INTERVAL_REP_DIVISOR_S,
    INTERVAL_WORK_S,
    LONG_RUN_COOLDOWN_S,
    RACE_SIM_SPLITS,
    STRUCTURED_COOLDOWN_S,
    STRUCTURED_WARMUP_S,
    TEMPO_MAIN_FRACTION,
    PrimaryTarget,
    SessionType,
    StepType,
)
from plan_engine.models.session import SessionStep, TrainingSession
from plan_engine.workout_builder import target_assigner as ta
from plan_engine.workout_builder.description_builder import (
    RACE_SIM_SEGMENT_CUES,
    TEMPO_TRANSITION_CUE,
    TEMPO_WORK_CUE,
    rep_cue,
    session_notes,
    session_title,
    step_cue,
)
from plan_engine.workout_builder.target_assigner import NO_TARGET, PaceHRTargets


def _step(
    order: int,
    step_type: StepType,
    duration_s: float,
    targets: PaceHRTargets = NO_TARGET,
    notes: str | None = None,
) -> SessionStep:
    return SessionStep(
        step_order=order,
        step_type=step_type,
        duration_type=DurationType.TIME,
        duration_value=round_half_up(duration_s),
        target_pace_low_sec_per_km=targets.pace_target_low,
        target_pace_high_sec_per_km=targets.pace_target_high,
        target_hr_low_bpm=targets.hr_target_low,
        target_hr_high_bpm=targets.hr_target_high,
        step_notes=notes,
    )


def build_easy_run(
    session_date: date, minutes: int, threshold_pace: float, threshold_hr: float,
) -> TrainingSession:
    """Conversational Zone 2 run, followed by heart rate."""
    total = minutes * 60
    warmup = min(EASY_WARMUP_CAP_S, total * EASY_WARMUP_FRACTION)
    cooldown = warmup
    main = max(total - warmup - cooldown, 0)

    warmup_targets = ta.assign_targets(threshold_pace, threshold_hr, hr=ta.WARMUP_HR)
    work_targets = ta.assign_targets(
        threshold_pace, threshold_hr, pace=ta.EASY_PACE, hr=ta.AEROBIC_HR,
    )
    session_type = SessionType.EASY
    return TrainingSession(
        session_date=session_date,
        title=session_title(session_type),
        session_type=session_type,
        primary_target=PrimaryTarget.HR,
        notes=session_notes(session_type, PrimaryTarget.HR, work_targets),
        steps=(
            _step(0, StepType.WARMUP, warmup, warmup_targets, step_cue(session_type, StepType.WARMUP)),
            _step(1, StepType.WORK, main, work_targets, step_cue(session_type, StepType.WORK)),
            _step(2, StepType.COOLDOWN, cooldown, NO_TARGET, step_cue(session_type, StepType.COOLDOWN)),
        ),
    )


def build_long_run(
    session_date: date,
    minutes: int,
    threshold_pace: float,
    threshold_hr: float,
    phase: float = 0.0,
) -> TrainingSession:
    """Steady aerobic long run. Past mid-plan the notes suggest late tempo segments."""
    total = minutes * 60
    main = max(total - STRUCTURED_WARMUP_S - LONG_RUN_COOLDOWN_S, 0)

    warmup_targets = ta.assign_targets(threshold_pace, threshold_hr, hr=ta.WARMUP_HR)
    work_targets = ta.assign_targets(
        threshold_pace, threshold_hr, pace=ta.LONG_RUN_PACE, hr=ta.AEROBIC_HR,
    )
    session_type = SessionType.LONG
    return TrainingSession(
        session_date=session_date,
        title=session_title(session_type),
        session_type=session_type,
        primary_target=PrimaryTarget.HR,
        notes=session_notes(session_type, PrimaryTarget.HR, work_targets, phase=phase),
        steps=(
            _step(0, StepType.WARMUP, STRUCTURED_WARMUP_S, warmup_targets, step_cue(session_type, StepType.WARMUP)),
            _step(1, StepType.WORK, main, work_targets, step_cue(session_type, StepType.WORK)),
            _step(2, StepType.COOLDOWN, LONG_RUN_COOLDOWN_S, NO_TARGET, step_cue(session_type, StepType.COOLDOWN)),
        ),
    )


def build_tempo(
    session_date: date, minutes: int, threshold_pace: float, threshold_hr: float,
) -> TrainingSession:
    """Easy transition into a sustained tempo block."""
    main = max(minutes * 60 - STRUCTURED_WARMUP_S - STRUCTURED_COOLDOWN_S, 0)
    tempo_time = round_half_up(main * TEMPO_MAIN_FRACTION)
    # The transition takes half of what the tempo block leaves over.
    transition = round_half_up((main - tempo_time) / 2)

    transition_targets = ta.assign_targets(threshold_pace, threshold_hr, pace=ta.TRANSITION_PACE)
    tempo_targets = ta.assign_targets(
        threshold_pace, threshold_hr, pace=ta.TEMPO_PACE, hr=ta.TEMPO_HR,
    )
    session_type = SessionType.TEMPO
    return TrainingSession(
        session_date=session_date,
        title=session_title(session_type),
        session_type=session_type,
        primary_target=PrimaryTarget.PACE,
        notes=session_notes(
            session_type, PrimaryTarget.PACE, tempo_targets, main_duration_s=tempo_time,
        ),
        steps=(
            _step(0, StepType.WARMUP, STRUCTURED_WARMUP_S, NO_TARGET, step_cue(session_type, StepType.WARMUP)),
            _step(1, StepType.WORK, transition, transition_targets, TEMPO_TRANSITION_CUE),
            _step(2, StepType.WORK, tempo_time, tempo_targets, TEMPO_WORK_CUE),
            _step(3, StepType.COOLDOWN, STRUCTURED_COOLDOWN_S, NO_TARGET, step_cue(session_type, StepType.COOLDOWN)),
        ),
    )


def interval_structure(remaining_s: int) -> tuple[int, int]:
    """Rep count and per-recovery duration for the time left after warmup/cooldown.

    Reps start at ``floor(remaining / 240)`` clamped to 3..8. Recovery jogs
    split whatever the 2 min reps leave over. When that would drop a
    recovery below 30 s the rep count is reduced, down to a single rep
    with no recovery at all.

    Returns:
        ``(reps, recovery_s)``; ``recovery_s`` is 0 when ``reps == 1``.
    """
    reps = max(INTERVAL_MIN_REPS, min(INTERVAL_MAX_REPS, remaining_s // INTERVAL_REP_DIVISOR_S))
    while reps > 1:
        recovery = round_half_up((remaining_s - reps * INTERVAL_WORK_S) / (reps - 1))
        if recovery >= INTERVAL_MIN_RECOVERY_S:
            return reps, recovery
        reps -= 1
    return 1, 0


def build_intervals(
    session_date: date, minutes: int, threshold_pace: float, threshold_hr: float,
) -> TrainingSession:
    """2 min hard reps separated by jog recoveries."""
    remaining = minutes * 60 - STRUCTURED_WARMUP_S - STRUCTURED_COOLDOWN_S
    reps, recovery = interval_structure(remaining)

    work_targets = ta.assign_targets(
        threshold_pace, threshold_hr, pace=ta.INTERVAL_PACE, hr=ta.INTERVAL_HR,
    )
    session_type = SessionType.INTERVAL

    steps = [
        _step(0, StepType.WARMUP, STRUCTURED_WARMUP_S, NO_TARGET, step_cue(session_type, StepType.WARMUP)),
    ]
    order = 1
    for rep in range(1, reps + 1):
        steps.append(_step(order, StepType.WORK, INTERVAL_WORK_S, work_targets, rep_cue(rep, reps)))
        order += 1
        if rep < reps:
            steps.append(_step(
                order, StepType.RECOVER, recovery, NO_TARGET, step_cue(session_type, StepType.RECOVER),
            ))
            order += 1
    steps.append(_step(
        order, StepType.COOLDOWN, STRUCTURED_COOLDOWN_S, NO_TARGET, step_cue(session_type, StepType.COOLDOWN),
    ))

    return TrainingSession(
        session_date=session_date,
        title=session_title(session_type, reps=reps),
        session_type=session_type,
        primary_target=PrimaryTarget.PACE,
        notes=session_notes(session_type, PrimaryTarget.PACE, work_targets),
        steps=tuple(steps),
    )


def build_race_simulation(
    session_date: date, minutes: int, threshold_pace: float, threshold_hr: float,
) -> TrainingSession:
    """Rehearse the race: easy start, race pace, then push the finish."""
    main = max(minutes * 60 - STRUCTURED_WARMUP_S - STRUCTURED_COOLDOWN_S, 0)
    bands = (ta.RACE_SIM_EASY_START_PACE, ta.RACE_SIM_RACE_PACE, ta.RACE_SIM_PUSH_FINISH_PACE)
    session_type = SessionType.RACE_SIM

    steps = [
        _step(0, StepType.WARMUP, STRUCTURED_WARMUP_S, NO_TARGET, step_cue(session_type, StepType.WARMUP)),
    ]
    for order, (split, band, cue) in enumerate(
        zip(RACE_SIM_SPLITS, bands, RACE_SIM_SEGMENT_CUES), start=1,
    ):
        targets = ta.assign_targets(threshold_pace, threshold_hr, pace=band)
        steps.append(_step(order, StepType.WORK, main * split, targets, cue))
    steps.append(_step(
        len(steps), StepType.COOLDOWN, STRUCTURED_COOLDOWN_S, NO_TARGET,
        step_cue(session_type, StepType.COOLDOWN),
    ))

    race_pace = ta.assign_targets(threshold_pace, threshold_hr, pace=ta.RACE_SIM_RACE_PACE)
    return TrainingSession(
        session_date=session_date,
        title=session_title(session_type),
        session_type=session_type,
        primary_target=PrimaryTarget.PACE,
        notes=session_notes(session_type, PrimaryTarget.PACE, race_pace),
        steps=tuple(steps),
    )


class SessionBuilder:
    """Builds sessions for one athlete's thresholds.

    Usage::

        builder = SessionBuilder(threshold_pace=330, threshold_hr=165)
        session = builder.build(SessionType.TEMPO, date(2025, 1, 6), 45)
    """

    def __init__(self, threshold_pace: float, threshold_hr: float) -> None:
        self.threshold_pace = threshold_pace
        self.threshold_hr = threshold_hr

    def build(
        self,
        session_type: SessionType,
        session_date: date,
        minutes: int,
        phase: float = 0.0,
    ) -> TrainingSession:
        """Build a session of the given type.

        Raises:
            ValueError: For session types the generator does not build
                (RECOVERY, STRENGTH).
        """
        if session_type == SessionType.LONG:
            return build_long_run(
                session_date, minutes, self.threshold_pace, self.threshold_hr, phase,
            )
        builder = _BUILDERS.get(session_type)
        if builder is None:
            raise ValueError(f"No session builder for {session_type.value!r}")
        return builder(session_date, minutes, self.threshold_pace, self.threshold_hr)


_BUILDERS = {
    SessionType.EASY: build_easy_run,
    SessionType.TEMPO: build_tempo,
    SessionType.INTERVAL: build_intervals,
    SessionType.RACE_SIM: build_race_simulation,
}
