"""Data models for the plan engine."""

from plan_engine.models.enums import (
    DAY_KEYS,
    DurationType,
    ExportRange,
    ExportType,
    PrimaryTarget,
    SessionType,
    StepType,
    ZoneType,
)
from plan_engine.models.profile import (
    AthleteProfile,
    AvailabilityProfile,
    GenerateInput,
    TrainingGoal,
)
from plan_engine.models.session import Plan, SessionStep, TrainingSession

__all__ = [
    "DAY_KEYS",
    "AthleteProfile",
    "AvailabilityProfile",
    "DurationType",
    "ExportRange",
    "ExportType",
    "GenerateInput",
    "Plan",
    "PrimaryTarget",
    "SessionStep",
    "SessionType",
    "StepType",
    "TrainingGoal",
    "TrainingSession",
    "ZoneType",
]
