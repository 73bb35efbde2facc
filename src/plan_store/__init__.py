"""Plan persistence: profiles, plans, sessions and export jobs."""

from plan_store.exceptions import (
    EmptyExportError,
    PlanNotFoundError,
    PlanStoreError,
    ProfileIncompleteError,
    SessionNotFoundError,
    StoreCorruptError,
)
from plan_store.service import ExportResult, RegenerationResult, export_plan, regenerate_plan
from plan_store.store import JsonPlanStore

__all__ = [
    "EmptyExportError",
    "ExportResult",
    "JsonPlanStore",
    "PlanNotFoundError",
    "PlanStoreError",
    "ProfileIncompleteError",
    "RegenerationResult",
    "SessionNotFoundError",
    "StoreCorruptError",
    "export_plan",
    "regenerate_plan",
]
