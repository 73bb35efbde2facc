"""JSON-file plan store.

Holds profiles, plans, sessions, steps and export jobs in a single JSON
document. Every mutation is a read-modify-write under a process lock,
persisted with a temp-file-then-rename so a failed write leaves the
previous document intact.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
import uuid
from collections import defaultdict
from contextlib import contextmanager
from dataclasses import replace
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Iterator

from plan_engine.models.profile import AthleteProfile, AvailabilityProfile, TrainingGoal
from plan_engine.models.session import Plan, TrainingSession
from plan_store import records
from plan_store.exceptions import PlanNotFoundError, SessionNotFoundError, StoreCorruptError

logger = logging.getLogger(__name__)

_DEFAULT_PLAN_NAME = "Spartan Ultra Plan"

_TABLES = (
    "athlete_profiles",
    "availability_profiles",
    "training_goals",
    "plans",
    "sessions",
    "session_steps",
    "export_jobs",
)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _new_id() -> str:
    return str(uuid.uuid4())


@contextmanager
def atomic_write(target_path: Path) -> Iterator[Any]:
    """Write to a temp file in the target directory, then rename over the target.

    On error the temp file is removed and the target is left unchanged.
    """
    target_path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_path = tempfile.mkstemp(
        dir=target_path.parent, prefix=f".{target_path.name}.", suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            yield f
        os.replace(temp_path, target_path)
    except Exception:
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise


class JsonPlanStore:
    """Persistence for plans and their sessions.

    Usage::

        store = JsonPlanStore("~/.stride-planner/store.json")
        plan = store.create_plan(user_id, start, race)
        store.replace_sessions(plan.id, sessions)
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path).expanduser()
        self._lock = threading.RLock()
        self._user_locks: dict[str, threading.Lock] = defaultdict(threading.Lock)

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # Document I/O
    # ------------------------------------------------------------------

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            return {table: ([] if table == "export_jobs" else {}) for table in _TABLES}
        try:
            with open(self._path, encoding="utf-8") as f:
                doc = json.load(f)
        except json.JSONDecodeError as exc:
            raise StoreCorruptError(f"Unreadable store at {self._path}: {exc}") from exc
        if not isinstance(doc, dict):
            raise StoreCorruptError(f"Store at {self._path} is not a JSON object")
        for table in _TABLES:
            doc.setdefault(table, [] if table == "export_jobs" else {})
        return doc

    def _write(self, doc: dict[str, Any]) -> None:
        with atomic_write(self._path) as f:
            json.dump(doc, f, indent=2)

    @contextmanager
    def user_lock(self, user_id: str) -> Iterator[None]:
        """Serialize plan regeneration for one user within this process."""
        with self._lock:
            lock = self._user_locks[user_id]
        with lock:
            yield

    # ------------------------------------------------------------------
    # Profiles
    # ------------------------------------------------------------------

    def save_athlete_profile(self, user_id: str, profile: AthleteProfile) -> None:
        self._save_profile("athlete_profiles", user_id, records.athlete_to_record(profile))

    def save_availability_profile(self, user_id: str, profile: AvailabilityProfile) -> None:
        self._save_profile("availability_profiles", user_id, records.availability_to_record(profile))

    def save_training_goal(self, user_id: str, goal: TrainingGoal) -> None:
        self._save_profile("training_goals", user_id, records.goal_to_record(goal))

    def get_athlete_profile(self, user_id: str) -> AthleteProfile | None:
        row = self._get_profile("athlete_profiles", user_id)
        return records.athlete_from_record(row) if row else None

    def get_availability_profile(self, user_id: str) -> AvailabilityProfile | None:
        row = self._get_profile("availability_profiles", user_id)
        return records.availability_from_record(row) if row else None

    def get_training_goal(self, user_id: str) -> TrainingGoal | None:
        row = self._get_profile("training_goals", user_id)
        return records.goal_from_record(row) if row else None

    def profile_id(self, table: str, user_id: str) -> str | None:
        row = self._get_profile(table, user_id)
        return row["id"] if row else None

    def _save_profile(self, table: str, user_id: str, fields: dict[str, Any]) -> None:
        with self._lock:
            doc = self._read()
            existing = doc[table].get(user_id)
            row = dict(existing) if existing else {"id": _new_id(), "user_id": user_id, "created_at": _now()}
            row.update(fields)
            row["updated_at"] = _now()
            doc[table][user_id] = row
            self._write(doc)
        logger.info("Saved %s for user %s", table, user_id)

    def _get_profile(self, table: str, user_id: str) -> dict[str, Any] | None:
        with self._lock:
            return self._read()[table].get(user_id)

    # ------------------------------------------------------------------
    # Plans
    # ------------------------------------------------------------------

    def create_plan(
        self,
        user_id: str,
        start_date: date,
        end_date: date,
        plan_name: str = _DEFAULT_PLAN_NAME,
        **links: str | None,
    ) -> Plan:
        """Create an active plan. ``links`` may carry the three profile ids."""
        row = {
            "id": _new_id(),
            "user_id": user_id,
            "plan_name": plan_name,
            "start_date": start_date.isoformat(),
            "end_date": end_date.isoformat(),
            "status": "active",
            "athlete_profile_id": links.get("athlete_profile_id"),
            "availability_profile_id": links.get("availability_profile_id"),
            "training_goal_id": links.get("training_goal_id"),
            "created_at": _now(),
            "updated_at": _now(),
        }
        with self._lock:
            doc = self._read()
            doc["plans"][row["id"]] = row
            self._write(doc)
        logger.info("Created plan %s for user %s", row["id"], user_id)
        return records.plan_from_record(row)

    def update_plan(self, plan_id: str, start_date: date, end_date: date, **links: str | None) -> Plan:
        """Reset a plan's date range, reactivate it and refresh its profile links.

        Raises:
            PlanNotFoundError: If the plan does not exist.
        """
        with self._lock:
            doc = self._read()
            row = doc["plans"].get(plan_id)
            if row is None:
                raise PlanNotFoundError(plan_id)
            row.update(
                start_date=start_date.isoformat(),
                end_date=end_date.isoformat(),
                status="active",
                updated_at=_now(),
            )
            row.update(links)
            self._write(doc)
        return records.plan_from_record(row)

    def get_plan(self, plan_id: str, user_id: str | None = None) -> Plan | None:
        """Look up a plan; with ``user_id`` only the owner's plan is returned."""
        with self._lock:
            row = self._read()["plans"].get(plan_id)
        if row is None or (user_id is not None and row["user_id"] != user_id):
            return None
        return records.plan_from_record(row)

    def get_latest_plan(self, user_id: str) -> Plan | None:
        """Most recently created plan for the user."""
        with self._lock:
            rows = [r for r in self._read()["plans"].values() if r["user_id"] == user_id]
        if not rows:
            return None
        return records.plan_from_record(rows[-1])

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    def replace_sessions(self, plan_id: str, sessions: list[TrainingSession] | tuple[TrainingSession, ...]) -> list[TrainingSession]:
        """Delete every session of a plan and insert ``sessions`` with their steps.

        The delete and the inserts land in one write, so readers see either
        the old plan or the new one.

        Returns:
            The inserted sessions with ids assigned.

        Raises:
            PlanNotFoundError: If the plan does not exist.
        """
        stored: list[TrainingSession] = []
        with self._lock:
            doc = self._read()
            if plan_id not in doc["plans"]:
                raise PlanNotFoundError(plan_id)

            old_ids = {sid for sid, row in doc["sessions"].items() if row["plan_id"] == plan_id}
            for sid in old_ids:
                del doc["sessions"][sid]
            doc["session_steps"] = {
                step_id: row for step_id, row in doc["session_steps"].items()
                if row["session_id"] not in old_ids
            }

            for session in sessions:
                session_id = _new_id()
                session_row = records.session_to_record(session, plan_id, session_id)
                session_row["created_at"] = session_row["updated_at"] = _now()
                doc["sessions"][session_id] = session_row
                step_rows = []
                for step in session.steps:
                    step_row = records.step_to_record(step, session_id, _new_id())
                    doc["session_steps"][step_row["id"]] = step_row
                    step_rows.append(step_row)
                stored.append(records.session_from_record(session_row, step_rows))

            self._write(doc)
        logger.info(
            "Replaced sessions for plan %s: %d removed, %d inserted",
            plan_id, len(old_ids), len(stored),
        )
        return stored

    def list_sessions(
        self,
        plan_id: str,
        start: date | None = None,
        end: date | None = None,
    ) -> list[TrainingSession]:
        """Sessions of a plan with their steps, date-ascending, optionally bounded (inclusive)."""
        with self._lock:
            doc = self._read()
        steps_by_session: dict[str, list[dict[str, Any]]] = defaultdict(list)
        for row in doc["session_steps"].values():
            steps_by_session[row["session_id"]].append(row)

        sessions = []
        for row in doc["sessions"].values():
            if row["plan_id"] != plan_id:
                continue
            session = records.session_from_record(row, steps_by_session.get(row["id"]))
            if start is not None and session.session_date < start:
                continue
            if end is not None and session.session_date > end:
                continue
            sessions.append(session)
        return sorted(sessions, key=lambda s: s.session_date)

    def set_completed(self, session_id: str, completed: bool) -> None:
        """Mark a session done or not done.

        Raises:
            SessionNotFoundError: If the session does not exist.
        """
        with self._lock:
            doc = self._read()
            row = doc["sessions"].get(session_id)
            if row is None:
                raise SessionNotFoundError(session_id)
            row["completed"] = completed
            row["updated_at"] = _now()
            self._write(doc)

    def update_session(self, session_id: str, session: TrainingSession) -> TrainingSession:
        """Save an edited session: its fields plus a fresh set of steps.

        The session keeps its id, plan and completion flag. Its old steps are
        deleted and ``session.steps`` inserted with ``step_order`` renumbered
        from 0 in list order.

        Returns:
            The stored session with its new step ids.

        Raises:
            SessionNotFoundError: If the session does not exist.
        """
        with self._lock:
            doc = self._read()
            row = doc["sessions"].get(session_id)
            if row is None:
                raise SessionNotFoundError(session_id)
            row.update(
                session_date=session.session_date.isoformat(),
                title=session.title,
                session_type=session.session_type.value,
                primary_target=session.primary_target.value,
                notes=session.notes,
                updated_at=_now(),
            )

            doc["session_steps"] = {
                step_id: step_row for step_id, step_row in doc["session_steps"].items()
                if step_row["session_id"] != session_id
            }
            step_rows = []
            for order, step in enumerate(session.steps):
                step_row = records.step_to_record(replace(step, step_order=order), session_id, _new_id())
                doc["session_steps"][step_row["id"]] = step_row
                step_rows.append(step_row)

            self._write(doc)
        logger.info("Updated session %s with %d steps", session_id, len(step_rows))
        return records.session_from_record(row, step_rows)

    # ------------------------------------------------------------------
    # Export jobs
    # ------------------------------------------------------------------

    def log_export_job(
        self,
        user_id: str,
        plan_id: str,
        range_start: date,
        range_end: date,
        export_type: str,
        status: str = "done",
    ) -> None:
        with self._lock:
            doc = self._read()
            doc["export_jobs"].append({
                "id": _new_id(),
                "user_id": user_id,
                "plan_id": plan_id,
                "range_start": range_start.isoformat(),
                "range_end": range_end.isoformat(),
                "export_type": export_type,
                "status": status,
                "created_at": _now(),
            })
            self._write(doc)

    def list_export_jobs(self, user_id: str) -> list[dict[str, Any]]:
        with self._lock:
            return [job for job in self._read()["export_jobs"] if job["user_id"] == user_id]
