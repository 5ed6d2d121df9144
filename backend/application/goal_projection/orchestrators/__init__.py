"""Orchestrators for goal projection."""

from .projection_orchestrator import ProjectionOrchestrator

__all__ = ["ProjectionOrchestrator"]
