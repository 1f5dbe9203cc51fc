"""
ErrorHalt: the fault-containment unit at the head of every action chain.

Halting policy:
- An environment that is already halted never enters the chain.
- ActionHalt raised by a unit halts the environment with its reason.
- Any other Exception is logged, recorded on the environment with
  env.halt(...), and swallowed unless settings.reraise_errors is set.
- If the environment has no halt() method, failures propagate unchanged.
- BaseExceptions that are not Exceptions (KeyboardInterrupt, SystemExit)
  are never caught.
"""

from __future__ import annotations

import logging
import traceback
from typing import Any

from actionstack.config import get_settings

from .errors import ActionHalt
from .middleware import App, Middleware
from .observability import ChainLogger

logger = logging.getLogger(__name__)


def failing_unit_name(exc: BaseException) -> str:
    """Name of the innermost unit whose call() frame the exception passed through."""
    name = "unknown"
    for frame, _ in traceback.walk_tb(exc.__traceback__):
        unit = frame.f_locals.get("self")
        if (
            frame.f_code.co_name == "call"
            and isinstance(unit, Middleware)
            and not isinstance(unit, ErrorHalt)
        ):
            name = unit.name
    return name


def _request_id(env: Any) -> str | None:
    execution_id = getattr(env, "execution_id", None)
    return str(execution_id) if execution_id is not None else None


class ErrorHalt(Middleware):
    """
    Failure boundary around the rest of the chain.

    Always compiled as the first unit, so every registered unit runs
    under its guard.
    """

    def __init__(self, app: App, env: Any):
        super().__init__(app, env)
        settings = get_settings()
        self.reraise_errors = settings.reraise_errors
        self.capture_traceback = settings.capture_traceback

    @property
    def name(self) -> str:
        return "error_halt"

    def call(self, env: Any) -> Any:
        if getattr(env, "halted", False):
            logger.info("Environment already halted, chain not entered")
            return None

        chain_logger = ChainLogger(request_id=_request_id(env))
        halt = getattr(env, "halt", None)

        try:
            return self.app(env)
        except ActionHalt as signal:
            if halt is None:
                raise
            unit_name = failing_unit_name(signal)
            halt(signal.reason, unit_name=unit_name)
            chain_logger.chain_halted(signal.reason, unit_name)
            return None
        except Exception as e:
            unit_name = failing_unit_name(e)
            chain_logger.unit_error(
                unit=unit_name,
                error=str(e),
                error_type=type(e).__name__,
            )
            if halt is None:
                raise
            halt(
                f"Unit '{unit_name}' failed",
                error=e,
                unit_name=unit_name,
                include_stack_trace=self.capture_traceback,
            )
            if self.reraise_errors:
                raise
            return None
