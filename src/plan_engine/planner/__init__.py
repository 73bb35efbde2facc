"""Plan generation: day classification and the week-by-week generator."""

from plan_engine.planner.day_classifier import DayClassification, classify_days
from plan_engine.planner.generator import PlanGenerator, generate_plan

__all__ = ["DayClassification", "PlanGenerator", "classify_days", "generate_plan"]
