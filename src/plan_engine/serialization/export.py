"""Export selection: date window, renderer choice and download filename."""

from __future__ import annotations

from datetime import date, datetime, timedelta

from plan_engine.models.enums import EXPORT_WINDOW_DAYS, ExportRange, ExportType
from plan_engine.models.session import TrainingSession
from plan_engine.serialization.fit_stub import to_fit_stub_string
from plan_engine.serialization.interchange import to_interchange_json_string


def export_window(today: date, export_range: ExportRange) -> tuple[date, date]:
    """Inclusive (start, end) dates: 7 days ahead for a week, 30 for a month."""
    return today, today + timedelta(days=EXPORT_WINDOW_DAYS[export_range])


def select_export_window(
    sessions: list[TrainingSession] | tuple[TrainingSession, ...],
    today: date,
    export_range: ExportRange = ExportRange.WEEK,
) -> list[TrainingSession]:
    """Sessions dated within the export window, sorted by date."""
    start, end = export_window(today, export_range)
    selected = [s for s in sessions if start <= s.session_date <= end]
    return sorted(selected, key=lambda s: s.session_date)


def render_export(
    sessions: list[TrainingSession] | tuple[TrainingSession, ...],
    export_type: ExportType,
    exported_at: datetime | None = None,
) -> str:
    """Render sessions as a UTF-8 JSON document of the requested type."""
    if export_type == ExportType.FIT:
        return to_fit_stub_string(sessions)
    return to_interchange_json_string(sessions, exported_at=exported_at)


def export_filename(export_type: ExportType, export_range: ExportRange, on_date: date) -> str:
    """Download filename, e.g. ``spartan-plan-week-2025-01-06.json``."""
    stamp = on_date.isoformat()
    if export_type == ExportType.FIT:
        return f"spartan-workouts-{export_range.value}-{stamp}.fit.json"
    return f"spartan-plan-{export_range.value}-{stamp}.json"
