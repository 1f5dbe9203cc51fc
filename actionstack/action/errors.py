"""
Exceptions for actionstack action chains.

Unit failures propagate as ordinary exceptions and are contained by
ErrorHalt at the head of every chain. ActionHalt is the one exception
a unit raises on purpose.
"""

from __future__ import annotations


class ActionError(Exception):
    """Base class for actionstack errors."""


class ActionHalt(ActionError):
    """
    Raised by a unit to halt the chain deliberately.

    ErrorHalt records the reason on the environment without treating it
    as a failure.

    Example:
        if not env.get("authorized"):
            raise ActionHalt("not authorized")
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Action chain halted: {reason}")
