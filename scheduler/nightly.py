"""Nightly scheduler — regenerates the training plan and writes an export file.

Usage:
    python -m scheduler.nightly --once      # single run (for cron)
    python -m scheduler.nightly --daemon    # APScheduler loop
"""

from __future__ import annotations

import argparse
import logging
from datetime import date
from pathlib import Path

from plan_engine.math.plan_load import session_type_counts, weekly_summary
from plan_engine.models.enums import ExportRange, ExportType, SessionType
from plan_engine.models.session import TrainingSession
from plan_engine.workout_builder.description_builder import SESSION_TYPE_LABELS
from plan_store import JsonPlanStore, PlanStoreError, export_plan, regenerate_plan
from plan_store.store import atomic_write

from scheduler.config import (
    EXPORT_DIR,
    EXPORT_RANGE,
    EXPORT_TYPE,
    NIGHTLY_HOUR,
    NIGHTLY_MINUTE,
    PLAN_STORE_PATH,
    PLAN_USER_ID,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def _session_mix(sessions: tuple[TrainingSession, ...]) -> str:
    """Session counts by display label, e.g. "Long Run x5, Tempo x4"."""
    counts = session_type_counts(sessions)
    return ", ".join(
        f"{SESSION_TYPE_LABELS[SessionType(value)]} x{count}" for value, count in counts.items()
    ) or "none"


def nightly_job(
    store_path: Path = PLAN_STORE_PATH,
    user_id: str = PLAN_USER_ID,
    export_dir: Path = EXPORT_DIR,
    today: date | None = None,
    export_type: str = EXPORT_TYPE,
    export_range: str = EXPORT_RANGE,
) -> Path | None:
    """Execute one nightly cycle: regenerate the plan, export the coming window.

    Returns:
        Path of the written export file, or None when the cycle stopped early.
    """
    logger.info("Starting nightly job")
    if not user_id:
        logger.error("PLAN_USER_ID is not set")
        return None

    try:
        file_type = ExportType(export_type.lower())
        window = ExportRange(export_range.lower())
    except ValueError as exc:
        logger.error("Invalid export settings: %s", exc)
        return None

    today = today or date.today()
    store = JsonPlanStore(store_path)

    # 1. Regenerate from the saved profiles
    try:
        result = regenerate_plan(store, user_id, today)
    except PlanStoreError as exc:
        logger.error("Failed to regenerate plan: %s", exc)
        return None

    summary = weekly_summary(result.sessions)
    logger.info(
        "Plan %s: %d weeks, %.0f planned minutes, mix %s",
        result.plan.id,
        len(summary),
        summary["planned_minutes"].sum() if len(summary) else 0.0,
        _session_mix(result.sessions),
    )

    # 2. Export the coming window
    try:
        export = export_plan(
            store,
            user_id,
            result.plan.id,
            file_type,
            window,
            today,
        )
    except PlanStoreError as exc:
        logger.warning("Nothing exported: %s", exc)
        return None

    target = Path(export_dir) / export.filename
    with atomic_write(target) as f:
        f.write(export.content)
    logger.info("Wrote %d sessions to %s", export.session_count, target)

    logger.info("Nightly job complete")
    return target


def main() -> None:
    parser = argparse.ArgumentParser(description="stride-planner nightly scheduler")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--once", action="store_true", help="Run once and exit")
    group.add_argument("--daemon", action="store_true", help="Run as APScheduler daemon")
    args = parser.parse_args()

    if args.once:
        nightly_job()
    else:
        from apscheduler.schedulers.blocking import BlockingScheduler

        scheduler = BlockingScheduler()
        scheduler.add_job(
            nightly_job,
            "cron",
            hour=NIGHTLY_HOUR,
            minute=NIGHTLY_MINUTE,
            id="nightly_job",
        )
        logger.info(
            "Scheduler started — nightly job at %02d:%02d",
            NIGHTLY_HOUR,
            NIGHTLY_MINUTE,
        )
        try:
            scheduler.start()
        except (KeyboardInterrupt, SystemExit):
            logger.info("Scheduler stopped")


if __name__ == "__main__":
    main()
