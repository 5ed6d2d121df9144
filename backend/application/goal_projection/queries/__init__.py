"""Queries for goal projection."""

from .compute_goal_plan import (
    ComputeGoalPlanHandler,
    ComputeGoalPlanQuery,
    GoalPlanResult,
)

__all__ = ["ComputeGoalPlanQuery", "ComputeGoalPlanHandler", "GoalPlanResult"]
