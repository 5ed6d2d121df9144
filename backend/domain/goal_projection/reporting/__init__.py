"""Result assembly and presentation for goal projection."""

from .narrative import render_narrative
from .projection import GoalProjection

__all__ = ["GoalProjection", "render_narrative"]
