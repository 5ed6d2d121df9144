"""Configuration utilities for infrastructure layer."""

import os
from dataclasses import fields
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

from domain.goal_projection.core.exceptions.domain_errors import (
    InvalidPolicyError,
)
from domain.goal_projection.core.policy import ProjectionPolicy

ENV_PREFIX = "GOAL_PROJECTION_"


def load_env_file(path: Optional[Path] = None) -> bool:
    """
    Load a .env file into the process environment.

    Existing environment variables win over the file.

    Args:
        path: .env location, defaults to the backend directory's .env

    Returns:
        True if a file was found and loaded
    """
    env_path = path or Path(__file__).parent.parent / ".env"
    if not env_path.exists():
        return False
    return load_dotenv(env_path, override=False)


def get_policy_overrides() -> Dict[str, float]:
    """
    Read projection policy overrides from the environment.

    Each ``ProjectionPolicy`` field maps to an upper-case variable with the
    ``GOAL_PROJECTION_`` prefix.

    Example .env:
        GOAL_PROJECTION_MAX_DEFICIT_KCAL=600
        GOAL_PROJECTION_RAPID_LOSS_KG_PER_WEEK=0.9

    Returns:
        Field name -> value for every variable that is set

    Raises:
        InvalidPolicyError: If a variable is not a number
    """
    overrides: Dict[str, float] = {}
    for f in fields(ProjectionPolicy):
        env_name = f"{ENV_PREFIX}{f.name.upper()}"
        raw = os.getenv(env_name)
        if raw is None or not raw.strip():
            continue
        try:
            overrides[f.name] = float(raw)
        except ValueError as e:
            raise InvalidPolicyError(f"{env_name} must be a number, got {raw!r}") from e
    return overrides


def get_projection_policy() -> ProjectionPolicy:
    """
    Build the projection policy from defaults plus environment overrides.

    Returns:
        ProjectionPolicy

    Raises:
        InvalidPolicyError: If an override is malformed or out of range
    """
    return ProjectionPolicy(**get_policy_overrides())


def get_log_level() -> str:
    """
    Get log level name.

    Returns:
        Upper-case level from LOG_LEVEL env var, defaults to "INFO"
    """
    return os.getenv("LOG_LEVEL", "INFO").upper()
