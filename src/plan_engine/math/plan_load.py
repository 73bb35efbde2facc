"""Plan load summaries: weekly volume, compliance, session-type mix.

Feeds dashboards and the scheduler's run summary. Weeks are Monday-first.
"""

from __future__ import annotations

from collections import Counter
from datetime import date, timedelta

import numpy as np
import pandas as pd

from plan_engine.math.periodization import week_monday
from plan_engine.models.session import TrainingSession

_SUMMARY_COLUMNS = ["planned", "completed", "planned_minutes", "compliance_pct"]


def weekly_summary(sessions: list[TrainingSession] | tuple[TrainingSession, ...]) -> pd.DataFrame:
    """Aggregate sessions into one row per training week.

    Args:
        sessions: Sessions in any order.

    Returns:
        DataFrame indexed by week start (Monday) with columns ``planned``
        (session count), ``completed``, ``planned_minutes`` and
        ``compliance_pct`` (completed / planned as a rounded integer
        percentage). Empty input gives an empty frame with those columns.
    """
    if not sessions:
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)

    frame = pd.DataFrame(
        {
            "week_start": [week_monday(s.session_date) for s in sessions],
            "planned": 1,
            "completed": [int(s.completed) for s in sessions],
            "planned_minutes": [s.total_duration_s / 60.0 for s in sessions],
        }
    )
    summary = frame.groupby("week_start").sum().sort_index()
    summary["planned_minutes"] = np.round(summary["planned_minutes"].astype(np.float64), 1)
    ratio = summary["completed"] / summary["planned"]
    summary["compliance_pct"] = np.floor(ratio * 100 + 0.5).astype(int)
    return summary[_SUMMARY_COLUMNS]


def session_type_counts(sessions: list[TrainingSession] | tuple[TrainingSession, ...]) -> dict[str, int]:
    """Count sessions per session type, most frequent first."""
    counts = Counter(s.session_type.value for s in sessions)
    return dict(counts.most_common())


def week_sessions(
    sessions: list[TrainingSession] | tuple[TrainingSession, ...], today: date,
) -> list[TrainingSession]:
    """Sessions falling in the Monday-Sunday week that contains ``today``."""
    start = week_monday(today)
    end = start + timedelta(days=6)
    return [s for s in sessions if start <= s.session_date <= end]


def upcoming_sessions(
    sessions: list[TrainingSession] | tuple[TrainingSession, ...],
    today: date,
    limit: int = 5,
) -> list[TrainingSession]:
    """The next ``limit`` incomplete sessions on or after ``today``."""
    pending = sorted(
        (s for s in sessions if not s.completed and s.session_date >= today),
        key=lambda s: s.session_date,
    )
    return pending[:limit]
