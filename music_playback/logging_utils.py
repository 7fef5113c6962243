"""
Logging helpers for the playback core
"""

import logging
from typing import Any, Dict, Optional, Union

from .models import RenderRecord

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a module logger"""
    return logging.getLogger(name)


def configure_logging(level: Union[str, int] = "INFO") -> None:
    """
    Configure root logging for applications embedding the player.

    Args:
        level: Level name (e.g. "DEBUG") or numeric level
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def log_state_change(logger: logging.Logger, component: str, old_state: Any, new_state: Any) -> None:
    """Log a state transition of a component"""
    old_name = getattr(old_state, "name", old_state)
    new_name = getattr(new_state, "name", new_state)
    logger.info(f"{component} state: {old_name} -> {new_name}")


def log_render(logger: logging.Logger, record: RenderRecord) -> None:
    """Log a rendered track"""
    logger.debug(f"Rendered on {record.device_kind.value}: {record.payload}")


def log_error(logger: logging.Logger, component: str, error: Exception,
              context: Optional[Dict[str, Any]] = None) -> None:
    """
    Log an error with optional context.

    Args:
        logger: Logger to write to
        component: Name of the component reporting the error
        error: The exception
        context: Extra key/value pairs describing what was going on
    """
    details = ""
    if context:
        details = " " + ", ".join(f"{key}={value}" for key, value in context.items())
    logger.error(f"{component} failed with {type(error).__name__}: {error}{details}")
