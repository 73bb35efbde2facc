"""Tests for the FIT-shaped JSON export."""

from __future__ import annotations

import json
from datetime import date

from plan_engine.models.enums import DurationType, StepType
from plan_engine.models.session import SessionStep
from plan_engine.serialization.fit_stub import (
    _build_target,
    _convert_step,
    pace_to_speed_units,
    to_fit_stub,
    to_fit_stub_string,
)
from plan_engine.workout_builder.builder import build_easy_run, build_intervals, build_tempo

DAY = date(2025, 1, 6)


class TestSpeedUnits:
    def test_five_minute_km(self) -> None:
        assert pace_to_speed_units(300) == 3333

    def test_faster_pace_is_higher_speed(self) -> None:
        assert pace_to_speed_units(240) > pace_to_speed_units(300)


class TestTargets:
    def test_pace_target_swaps_bounds(self) -> None:
        step = SessionStep(step_order=0, step_type=StepType.WORK,
                           target_pace_low_sec_per_km=323, target_pace_high_sec_per_km=347)
        target = _build_target(step)
        assert target["targetType"] == "SPEED"
        # the slower pace is the low speed bound
        assert target["customTargetLow"] == pace_to_speed_units(347)
        assert target["customTargetHigh"] == pace_to_speed_units(323)
        assert target["customTargetLow"] < target["customTargetHigh"]

    def test_pace_beats_hr(self) -> None:
        step = SessionStep(step_order=0, step_type=StepType.WORK,
                           target_pace_low_sec_per_km=380, target_pace_high_sec_per_km=413,
                           target_hr_low_bpm=124, target_hr_high_bpm=140)
        assert _build_target(step)["targetType"] == "SPEED"

    def test_hr_target(self) -> None:
        step = SessionStep(step_order=0, step_type=StepType.WARMUP,
                           target_hr_low_bpm=107, target_hr_high_bpm=124)
        assert _build_target(step) == {
            "targetType": "HEART_RATE",
            "targetValue": 0,
            "customTargetLow": 107,
            "customTargetHigh": 124,
        }

    def test_open_target(self) -> None:
        step = SessionStep(step_order=0, step_type=StepType.COOLDOWN)
        assert _build_target(step)["targetType"] == "OPEN"


class TestSteps:
    def test_time_in_milliseconds(self) -> None:
        step = SessionStep(step_order=2, step_type=StepType.WORK, duration_value=120, step_notes="Rep 1/3")
        result = _convert_step(step)
        assert result["durationType"] == "TIME"
        assert result["durationValue"] == 120_000
        assert result["messageIndex"] == 2
        assert result["workoutStepName"] == "Rep 1/3"
        assert result["intensity"] == "ACTIVE"

    def test_distance_in_centimeters(self) -> None:
        step = SessionStep(step_order=0, step_type=StepType.WORK,
                           duration_type=DurationType.DISTANCE, duration_value=400)
        result = _convert_step(step)
        assert result["durationType"] == "DISTANCE"
        assert result["durationValue"] == 40_000
        assert result["workoutStepName"] == "work"

    def test_intensity_mapping(self) -> None:
        session = build_intervals(DAY, 30, 330, 165)
        intensities = [_convert_step(s)["intensity"] for s in session.steps]
        assert intensities == ["WARMUP", "ACTIVE", "REST", "ACTIVE", "REST", "ACTIVE", "WARMUP"]


class TestWorkouts:
    def test_workout_header(self) -> None:
        workout = to_fit_stub([build_tempo(DAY, 45, 330, 165)])[0]
        assert workout["fileType"] == "WORKOUT"
        assert workout["workoutName"] == "2025-01-06_Tempo_Run"
        assert workout["sport"] == "RUNNING"
        assert workout["subSport"] == "STREET"
        assert workout["numValidSteps"] == 4

    def test_intervals_on_track(self) -> None:
        workout = to_fit_stub([build_intervals(DAY, 30, 330, 165)])[0]
        assert workout["subSport"] == "TRACK"
        assert workout["workoutName"] == "2025-01-06_3x2min_Intervals"

    def test_string_output(self) -> None:
        sessions = [build_easy_run(DAY, 30, 330, 165), build_tempo(DAY, 45, 330, 165)]
        assert len(json.loads(to_fit_stub_string(sessions))) == 2

    def test_empty(self) -> None:
        assert to_fit_stub([]) == []
