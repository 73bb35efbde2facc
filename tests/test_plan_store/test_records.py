"""Tests for stored-row mapping."""

from __future__ import annotations

from datetime import date

from plan_engine.models.enums import DurationType, PrimaryTarget, SessionType, StepType
from plan_engine.models.profile import AthleteProfile, AvailabilityProfile
from plan_engine.models.session import SessionStep, TrainingSession
from plan_store import records


class TestProfiles:
    def test_athlete_uses_threshold_hr_column(self) -> None:
        row = records.athlete_to_record(AthleteProfile(threshold_pace_sec_per_km=300, threshold_hr_bpm=170))
        assert row == {"threshold_pace_sec_per_km": 300, "threshold_hr": 170}
        assert records.athlete_from_record(row) == AthleteProfile(300, 170)

    def test_availability_drops_unknown_days(self) -> None:
        profile = records.availability_from_record({
            "days_available_json": {"mon": True, "funday": True},
            "max_minutes_by_day_json": {"mon": 40, "funday": 10, "tue": None},
        })
        assert profile.days_available == {"mon": True}
        assert profile.max_minutes_by_day == {"mon": 40}
        assert profile.preferred_long_run_day == "sat"
        assert profile.weekend_long_run_avoid is False

    def test_availability_round_trip(self, three_day_availability: AvailabilityProfile) -> None:
        row = records.availability_to_record(three_day_availability)
        assert records.availability_from_record(row) == three_day_availability


class TestSessions:
    def test_session_row_uses_persisted_names(self) -> None:
        session = TrainingSession(
            session_date=date(2025, 1, 6),
            title="Easy Run",
            session_type=SessionType.EASY,
            primary_target=PrimaryTarget.HR,
            notes="Keep it conversational.",
        )
        row = records.session_to_record(session, "plan-1", "sess-1")
        assert tuple(row) == records.SESSION_FIELDS
        assert row["session_date"] == "2025-01-06"
        assert row["session_type"] == "easy"
        assert row["primary_target"] == "hr"

    def test_step_row_fields(self) -> None:
        step = SessionStep(step_order=1, step_type=StepType.WORK, duration_value=600,
                           target_hr_low_bpm=124, target_hr_high_bpm=140, step_notes="Easy pace, Zone 2")
        row = records.step_to_record(step, "sess-1", "step-1")
        assert tuple(row) == records.STEP_FIELDS
        assert row["duration_type"] == "time"
        assert row["target_pace_low_sec_per_km"] is None

    def test_steps_rebuilt_in_order(self) -> None:
        session_row = {
            "id": "sess-1",
            "plan_id": "plan-1",
            "session_date": "2025-01-06",
            "title": "Tempo Run",
            "session_type": "tempo",
            "primary_target": "pace",
            "notes": None,
            "completed": True,
        }
        step_rows = [
            {"id": "b", "session_id": "sess-1", "step_order": 1, "step_type": "work", "duration_value": 900},
            {"id": "a", "session_id": "sess-1", "step_order": 0, "step_type": "warmup", "duration_value": 600},
        ]
        session = records.session_from_record(session_row, step_rows)
        assert [s.step_order for s in session.steps] == [0, 1]
        assert session.steps[0].duration_type == DurationType.TIME
        assert session.steps[1].id == "b"
        assert session.completed
        assert session.plan_id == "plan-1"
