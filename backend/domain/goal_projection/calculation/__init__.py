"""Calculation services for goal projection."""

from ..core.value_objects.muscular_potential import MuscularPotential
from ..core.value_objects.weight_checkpoint import WeightCheckpoint
from .bmr_service import BMRService
from .composition_service import BodyCompositionService
from .goal_strategy_service import GoalStrategyService
from .macro_service import MacroService
from .muscular_potential_service import MuscularPotentialService
from .safety_clamp_service import SafetyClampService
from .tdee_service import TDEEService
from .trajectory_service import WeightTrajectoryService

__all__ = [
    "BMRService",
    "TDEEService",
    "BodyCompositionService",
    "GoalStrategyService",
    "SafetyClampService",
    "MacroService",
    "MuscularPotential",
    "MuscularPotentialService",
    "WeightCheckpoint",
    "WeightTrajectoryService",
]
