"""
Settings loading for actionstack.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from .schemas import DEFAULT_LOG_FORMAT, ActionSettings

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


@lru_cache()
def get_settings() -> ActionSettings:
    """
    Get settings from environment.

    Uses lru_cache for singleton pattern; call get_settings.cache_clear()
    after changing the environment.
    """
    return ActionSettings(
        service_name=os.getenv("ACTIONSTACK_SERVICE_NAME", "actionstack"),
        environment=os.getenv("ACTIONSTACK_ENVIRONMENT", "development"),
        debug=_env_flag("ACTIONSTACK_DEBUG"),
        log_level=os.getenv("ACTIONSTACK_LOG_LEVEL", "INFO"),
        log_format=os.getenv("ACTIONSTACK_LOG_FORMAT", DEFAULT_LOG_FORMAT),
        reraise_errors=_env_flag("ACTIONSTACK_RERAISE_ERRORS"),
        capture_traceback=_env_flag("ACTIONSTACK_CAPTURE_TRACEBACK", "true"),
    )


def configure_logging(settings: ActionSettings | None = None) -> None:
    """Configure root logging for an application running action chains."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format=settings.log_format)
    logger.debug(f"Logging configured: level={level}")
