"""
Configuration module for actionstack.
"""

from .schemas import ActionSettings
from .settings import configure_logging, get_settings

__all__ = [
    "ActionSettings",
    "configure_logging",
    "get_settings",
]
