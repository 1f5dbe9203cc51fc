"""
Configuration Schemas for actionstack.

Pydantic models for library and application settings.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ActionSettings(BaseModel):
    """
    Settings for building and running action chains.

    Used for type-safe settings access. Loaded from ACTIONSTACK_*
    environment variables by get_settings().
    """

    # Service identity
    service_name: str = "actionstack"
    environment: str = "development"
    debug: bool = False

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_format: str = Field(
        default=DEFAULT_LOG_FORMAT,
        description="logging.basicConfig format string",
    )

    # Fault containment
    reraise_errors: bool = Field(
        default=False,
        description="Re-raise unit failures after ErrorHalt records them",
    )
    capture_traceback: bool = Field(
        default=True,
        description="Keep formatted tracebacks in halt records",
    )

    class Config:
        extra = "ignore"
