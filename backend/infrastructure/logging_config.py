"""Basic logging configuration (minimal)."""

import logging

from .config import get_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_PROJECT_LOGGERS = ("domain.goal_projection", "application.goal_projection")


def configure_logging() -> None:
    """Configure root logging from LOG_LEVEL.

    Safe to call more than once; ``basicConfig`` is a no-op when handlers
    already exist. Project loggers get the configured level unless one was
    set explicitly.
    """
    level = getattr(logging, get_log_level(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    for name in _PROJECT_LOGGERS:
        lg = logging.getLogger(name)
        if lg.level == logging.NOTSET:
            lg.setLevel(level)
