"""Ports (interfaces) for goal projection domain."""

from .calculators import (
    IBMRCalculator,
    IBodyCompositionEstimator,
    IGoalStrategy,
    IMacroCalculator,
    IMuscularPotentialEstimator,
    ISafetyClamp,
    ITDEECalculator,
    IWeightTrajectory,
)

__all__ = [
    "IBMRCalculator",
    "ITDEECalculator",
    "IBodyCompositionEstimator",
    "IGoalStrategy",
    "ISafetyClamp",
    "IMacroCalculator",
    "IWeightTrajectory",
    "IMuscularPotentialEstimator",
]
