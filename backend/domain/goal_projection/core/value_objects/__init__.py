"""Value objects for goal projection domain."""

from .activity_level import ActivityLevel
from .bmr import BMR
from .body_composition import BodyComposition
from .energy_profile import EnergyProfile
from .goal import Goal
from .goal_direction import GoalDirection
from .goal_plan import GoalPlan, StrategyOutcome
from .macro_plan import MacroPlan
from .macro_split import MacroSplit
from .muscular_potential import MuscularPotential
from .profile_draft import ProfileDraft
from .sex import Sex
from .tdee import TDEE
from .user_profile import UserProfile
from .warning_kind import WarningKind
from .weight_checkpoint import WeightCheckpoint

__all__ = [
    "ActivityLevel",
    "Sex",
    "Goal",
    "GoalDirection",
    "WarningKind",
    "ProfileDraft",
    "UserProfile",
    "BMR",
    "TDEE",
    "BodyComposition",
    "EnergyProfile",
    "StrategyOutcome",
    "GoalPlan",
    "MacroSplit",
    "MacroPlan",
    "MuscularPotential",
    "WeightCheckpoint",
]
