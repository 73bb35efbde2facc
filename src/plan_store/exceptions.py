"""Custom exception hierarchy for the plan store."""

from __future__ import annotations


class PlanStoreError(Exception):
    """Base exception for all plan_store errors."""


class StoreCorruptError(PlanStoreError):
    """The store file exists but is not a readable store document."""


class PlanNotFoundError(PlanStoreError):
    """No plan with that id exists for the requesting user."""

    def __init__(self, plan_id: str) -> None:
        super().__init__(f"Plan not found or access denied: {plan_id}")
        self.plan_id = plan_id


class ProfileIncompleteError(PlanStoreError):
    """A profile needed for generation has not been saved yet."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"Complete your profile first; missing: {', '.join(missing)}")
        self.missing = missing


class EmptyExportError(PlanStoreError):
    """The requested export window contains no sessions."""


class SessionNotFoundError(PlanStoreError):
    """No stored session with that id."""
