"""GoalDirection value object - branch taken by the goal strategy."""

from enum import Enum


class GoalDirection(str, Enum):
    """Energy-balance direction of a plan."""

    LOSS = "loss"
    GAIN = "gain"
    HOLD = "hold"
