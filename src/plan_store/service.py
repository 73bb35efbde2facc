"""Plan services — regeneration and export on top of the store.

Regeneration is a full replace: the plan's sessions are deleted and the
generator's output inserted in their place, so the latest generation is
the only source of truth for a plan's content.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime

from plan_engine.models.enums import ExportRange, ExportType
from plan_engine.models.profile import GenerateInput
from plan_engine.models.session import Plan, TrainingSession
from plan_engine.planner.generator import generate_plan
from plan_engine.serialization.export import export_filename, export_window, render_export
from plan_store.exceptions import EmptyExportError, PlanNotFoundError, ProfileIncompleteError
from plan_store.store import JsonPlanStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegenerationResult:
    plan: Plan
    sessions: tuple[TrainingSession, ...]
    created: bool


@dataclass(frozen=True)
class ExportResult:
    filename: str
    content: str
    session_count: int
    range_start: date
    range_end: date


def regenerate_plan(store: JsonPlanStore, user_id: str, today: date) -> RegenerationResult:
    """Generate a fresh plan from the user's saved profiles and store it.

    Reuses the user's latest plan when there is one, otherwise creates a
    plan. Runs under the store's per-user lock so two regenerations for the
    same user cannot interleave their delete and insert.

    Args:
        store: The plan store.
        user_id: Owner of the profiles and plan.
        today: Plan start date.

    Raises:
        ProfileIncompleteError: If the athlete profile, availability or
            training goal has not been saved.
    """
    athlete = store.get_athlete_profile(user_id)
    availability = store.get_availability_profile(user_id)
    goal = store.get_training_goal(user_id)
    missing = [
        name for name, value in (
            ("athlete profile", athlete),
            ("availability", availability),
            ("training goal", goal),
        )
        if value is None
    ]
    if missing:
        raise ProfileIncompleteError(missing)

    generated = generate_plan(GenerateInput.from_profiles(today, athlete, availability, goal))
    links = {
        "athlete_profile_id": store.profile_id("athlete_profiles", user_id),
        "availability_profile_id": store.profile_id("availability_profiles", user_id),
        "training_goal_id": store.profile_id("training_goals", user_id),
    }

    with store.user_lock(user_id):
        existing = store.get_latest_plan(user_id)
        if existing is not None:
            plan = store.update_plan(existing.id, today, goal.race_date, **links)
        else:
            plan = store.create_plan(user_id, today, goal.race_date, **links)
        stored = store.replace_sessions(plan.id, generated)

    logger.info(
        "Generated %d sessions for user %s (plan %s, race %s)",
        len(stored), user_id, plan.id, goal.race_date.isoformat(),
    )
    return RegenerationResult(plan=plan, sessions=tuple(stored), created=existing is None)


def export_plan(
    store: JsonPlanStore,
    user_id: str,
    plan_id: str,
    export_type: ExportType,
    export_range: ExportRange,
    today: date,
    exported_at: datetime | None = None,
) -> ExportResult:
    """Render the plan's sessions for the coming week or month.

    Raises:
        PlanNotFoundError: If the plan does not exist or belongs to another user.
        EmptyExportError: If no session falls in the export window.
    """
    plan = store.get_plan(plan_id, user_id=user_id)
    if plan is None:
        raise PlanNotFoundError(plan_id)

    start, end = export_window(today, export_range)
    sessions = store.list_sessions(plan.id, start=start, end=end)
    if not sessions:
        raise EmptyExportError(
            f"No sessions between {start.isoformat()} and {end.isoformat()}"
        )

    content = render_export(sessions, export_type, exported_at=exported_at)
    filename = export_filename(export_type, export_range, today)
    store.log_export_job(
        user_id, plan.id, start, end, export_type=export_type.value.upper(),
    )
    logger.info("Exported %d sessions to %s", len(sessions), filename)
    return ExportResult(
        filename=filename,
        content=content,
        session_count=len(sessions),
        range_start=start,
        range_end=end,
    )
