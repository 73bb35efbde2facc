"""Tests for the session builders: step structure, durations and targets."""

from __future__ import annotations

from datetime import date

import pytest

from plan_engine.models.enums import PrimaryTarget, SessionType, StepType
from plan_engine.workout_builder.builder import (
    SessionBuilder,
    build_easy_run,
    build_intervals,
    build_long_run,
    build_race_simulation,
    build_tempo,
    interval_structure,
)

DAY = date(2025, 1, 6)
PACE = 330
HR = 165


def _durations(session) -> list[int]:
    return [s.duration_value for s in session.steps]


def _types(session) -> list[StepType]:
    return [s.step_type for s in session.steps]


class TestEasyRun:
    def test_structure(self) -> None:
        session = build_easy_run(DAY, 30, PACE, HR)
        assert _types(session) == [StepType.WARMUP, StepType.WORK, StepType.COOLDOWN]
        # 15% of 1800s = 270s, under the 5 min cap
        assert _durations(session) == [270, 1260, 270]
        assert session.total_duration_s == 1800

    def test_warmup_capped_at_five_minutes(self) -> None:
        session = build_easy_run(DAY, 60, PACE, HR)
        assert _durations(session) == [300, 3000, 300]

    def test_hr_primary_with_aerobic_band(self) -> None:
        session = build_easy_run(DAY, 30, PACE, HR)
        work = session.steps[1]
        assert session.primary_target == PrimaryTarget.HR
        assert (work.target_hr_low_bpm, work.target_hr_high_bpm) == (124, 140)
        assert work.has_pace_target
        assert session.notes == "Keep it conversational. Zone 2 effort. Target 124-140 bpm."

    def test_cooldown_has_no_target(self) -> None:
        cooldown = build_easy_run(DAY, 30, PACE, HR).steps[2]
        assert not cooldown.has_pace_target
        assert not cooldown.has_hr_target


class TestLongRun:
    def test_structure(self) -> None:
        session = build_long_run(DAY, 90, PACE, HR)
        assert session.title == "Long Run"
        assert _durations(session) == [600, 4200, 600]
        work = session.steps[1]
        assert (work.target_pace_low_sec_per_km, work.target_pace_high_sec_per_km) == (363, 413)

    def test_notes_follow_phase(self) -> None:
        early = build_long_run(DAY, 90, PACE, HR, phase=0.2)
        late = build_long_run(DAY, 90, PACE, HR, phase=0.6)
        assert early.notes.startswith("Build endurance. Stay in Zone 2 throughout.")
        assert late.notes.startswith("Build endurance. Include some tempo segments in the last third.")

    def test_short_budget_clamps_main_to_zero(self) -> None:
        session = build_long_run(DAY, 15, PACE, HR)
        assert session.steps[1].duration_value == 0


class TestTempo:
    def test_structure(self) -> None:
        session = build_tempo(DAY, 45, PACE, HR)
        assert _types(session) == [StepType.WARMUP, StepType.WORK, StepType.WORK, StepType.COOLDOWN]
        # main 1800s: 70% tempo, half of the rest as transition
        assert _durations(session) == [600, 270, 1260, 300]

    def test_tempo_targets_and_notes(self) -> None:
        session = build_tempo(DAY, 45, PACE, HR)
        tempo = session.steps[2]
        assert (tempo.target_pace_low_sec_per_km, tempo.target_pace_high_sec_per_km) == (323, 347)
        assert tempo.step_notes == "Tempo effort"
        assert session.steps[1].step_notes == "Easy transition"
        assert session.primary_target == PrimaryTarget.PACE
        assert session.notes == "Comfortably hard. Zone 3-4 effort. Main set 21min at 5:23-5:47/km."


class TestIntervalStructure:
    def test_thirty_minute_session(self) -> None:
        # 1800 - 600 - 300 = 900s left: 3 reps, (900 - 360) / 2 recovery
        assert interval_structure(900) == (3, 270)

    def test_reps_capped_at_eight(self) -> None:
        reps, recovery = interval_structure(2700)
        assert reps == 8
        assert recovery == 249

    def test_reduces_reps_to_keep_recovery(self) -> None:
        assert interval_structure(300) == (2, 60)

    def test_single_rep_when_nothing_fits(self) -> None:
        assert interval_structure(120) == (1, 0)
        assert interval_structure(-300) == (1, 0)

    @pytest.mark.parametrize("remaining", [300, 480, 600, 900, 1500, 2700, 4000])
    def test_recovery_never_below_thirty_seconds(self, remaining: int) -> None:
        reps, recovery = interval_structure(remaining)
        if reps > 1:
            assert recovery >= 30


class TestIntervals:
    def test_thirty_minute_session_has_seven_steps(self) -> None:
        session = build_intervals(DAY, 30, PACE, HR)
        assert len(session.steps) == 7
        assert _types(session) == [
            StepType.WARMUP,
            StepType.WORK, StepType.RECOVER,
            StepType.WORK, StepType.RECOVER,
            StepType.WORK,
            StepType.COOLDOWN,
        ]
        assert _durations(session) == [600, 120, 270, 120, 270, 120, 300]
        assert session.title == "3x2min Intervals"

    def test_rep_cues(self) -> None:
        session = build_intervals(DAY, 30, PACE, HR)
        cues = [s.step_notes for s in session.steps if s.step_type == StepType.WORK]
        assert cues == ["Rep 1/3", "Rep 2/3", "Rep 3/3"]

    def test_step_order_contiguous(self) -> None:
        session = build_intervals(DAY, 60, PACE, HR)
        assert [s.step_order for s in session.steps] == list(range(len(session.steps)))

    def test_short_budget_single_rep(self) -> None:
        session = build_intervals(DAY, 17, PACE, HR)
        assert _types(session) == [StepType.WARMUP, StepType.WORK, StepType.COOLDOWN]
        assert session.title == "1x2min Intervals"


class TestRaceSimulation:
    def test_three_segments(self) -> None:
        session = build_race_simulation(DAY, 45, PACE, HR)
        assert _durations(session) == [600, 720, 720, 360, 300]
        assert [s.step_notes for s in session.steps[1:4]] == ["Easy start", "Race pace", "Push finish"]
        assert session.steps[4].step_order == 4

    def test_segments_get_faster(self) -> None:
        session = build_race_simulation(DAY, 60, PACE, HR)
        lows = [s.target_pace_low_sec_per_km for s in session.steps[1:4]]
        assert lows == sorted(lows, reverse=True)


class TestSessionBuilder:
    def test_dispatches_by_type(self) -> None:
        builder = SessionBuilder(threshold_pace=PACE, threshold_hr=HR)
        for session_type in (SessionType.EASY, SessionType.LONG, SessionType.TEMPO,
                             SessionType.INTERVAL, SessionType.RACE_SIM):
            session = builder.build(session_type, DAY, 45)
            assert session.session_type == session_type
            assert session.session_date == DAY

    @pytest.mark.parametrize("session_type", [SessionType.RECOVERY, SessionType.STRENGTH])
    def test_unbuildable_types_raise(self, session_type: SessionType) -> None:
        with pytest.raises(ValueError):
            SessionBuilder(PACE, HR).build(session_type, DAY, 45)

    def test_durations_are_whole_seconds(self) -> None:
        builder = SessionBuilder(threshold_pace=PACE, threshold_hr=HR)
        for session_type in (SessionType.EASY, SessionType.TEMPO, SessionType.RACE_SIM):
            for minutes in (21, 37, 53):
                session = builder.build(session_type, DAY, minutes)
                assert all(isinstance(s.duration_value, int) for s in session.steps)
                assert all(s.duration_value >= 0 for s in session.steps)
