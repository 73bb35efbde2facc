"""Environment-variable-based configuration for the nightly scheduler."""

from __future__ import annotations

import os
from pathlib import Path

PLAN_STORE_PATH: Path = Path(
    os.environ.get("PLAN_STORE_PATH", "~/.stride-planner/store.json")
).expanduser()
PLAN_USER_ID: str = os.environ.get("PLAN_USER_ID", "")
EXPORT_DIR: Path = Path(os.environ.get("EXPORT_DIR", "~/.stride-planner/exports")).expanduser()
EXPORT_RANGE: str = os.environ.get("EXPORT_RANGE", "week")
EXPORT_TYPE: str = os.environ.get("EXPORT_TYPE", "json")
NIGHTLY_HOUR: int = int(os.environ.get("SCHEDULER_HOUR", "21"))
NIGHTLY_MINUTE: int = int(os.environ.get("SCHEDULER_MINUTE", "0"))
