"""Plan engine: zones, session builders, plan generation and export."""

from plan_engine.planner.generator import PlanGenerator, generate_plan

__all__ = ["PlanGenerator", "generate_plan"]
