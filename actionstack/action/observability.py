"""
Observability for actionstack action chains.

Structured, JSON-formatted lifecycle logging of chain execution,
emitted through the standard logging module.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from actionstack.config import get_settings


@dataclass
class JSONLogger:
    """
    Logger that renders each record as one JSON object.

    Each record includes a timestamp, the level, the message, the fixed
    extra_context fields, the call's own fields and, when set, the
    request_id for correlation.

    Example output:
        {"timestamp": "2026-01-02T10:30:00+00:00", "level": "info",
         "message": "Chain started", "service": "actionstack",
         "units": ["error_halt", "a"], "request_id": "abc-123"}
    """

    name: str = "actionstack"
    request_id: str | None = None
    extra_context: dict[str, Any] = field(default_factory=dict)
    _python_logger: logging.Logger | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self._python_logger = logging.getLogger(self.name)

    def _log(
        self,
        level: int,
        message: str,
        context: dict[str, Any],
        exc_info: bool = False,
    ) -> None:
        if not self._python_logger.isEnabledFor(level):
            return

        record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": logging.getLevelName(level).lower(),
            "message": message,
            **self.extra_context,
            **context,
        }
        if self.request_id:
            record["request_id"] = self.request_id

        self._python_logger.log(level, json.dumps(record, default=str), exc_info=exc_info)

    def info(self, message: str, **context: Any) -> None:
        self._log(logging.INFO, message, context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(logging.WARNING, message, context)

    def error(self, message: str, *, exc_info: bool = False, **context: Any) -> None:
        self._log(logging.ERROR, message, context, exc_info=exc_info)


@dataclass
class ChainLogger:
    """
    Lifecycle events of one action chain invocation.

    Every record carries the configured service name and environment.

    Example:
        logger = ChainLogger(request_id="abc-123")
        logger.chain_started(units=["error_halt", "load_config"])
        logger.chain_completed(duration_ms=12.5, halted=False)
    """

    request_id: str | None = None
    chain_name: str = ""
    inner: JSONLogger | None = None

    def __post_init__(self) -> None:
        if self.inner is None:
            settings = get_settings()
            extra_context = {
                "service": settings.service_name,
                "environment": settings.environment,
            }
            if self.chain_name:
                extra_context["chain"] = self.chain_name
            self.inner = JSONLogger(
                name="actionstack.chain",
                request_id=self.request_id,
                extra_context=extra_context,
            )

    def chain_started(self, units: list[str]) -> None:
        self.inner.info("Chain started", units=units, unit_count=len(units))

    def chain_completed(self, duration_ms: float, halted: bool) -> None:
        if halted:
            self.inner.warning(
                "Chain halted", duration_ms=round(duration_ms, 2), halted=True
            )
        else:
            self.inner.info(
                "Chain completed", duration_ms=round(duration_ms, 2), halted=False
            )

    def chain_failed(self, duration_ms: float, error_type: str) -> None:
        """The invocation ended with an exception escaping the chain."""
        self.inner.warning(
            "Chain failed",
            duration_ms=round(duration_ms, 2),
            error_type=error_type,
        )

    def unit_error(self, unit: str, error: str, error_type: str) -> None:
        """Logged from inside an except block; includes the traceback."""
        self.inner.error(
            "Unit error",
            exc_info=True,
            unit=unit,
            error=error,
            error_type=error_type,
        )

    def chain_halted(self, reason: str, unit: str | None) -> None:
        self.inner.info("Chain halted by unit", reason=reason, unit=unit)
