"""
Middleware abstraction for actionstack action chains.

A unit of an action chain wraps the remainder of the chain. It is built
with the next executable (``app``) and the environment, and decides on
every call whether to continue by calling ``self.app(env)``.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from .environment import Environment

# Anything invocable with the environment: a unit or the terminal no-op.
App = Callable[[Any], Any]

# Split before a capital that follows a lowercase letter or digit, and
# before the last capital of an acronym run: HTTPFetch -> http_fetch.
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def unit_name_of(unit: Any) -> str:
    """Display name for a unit class, factory or instance."""
    name = getattr(unit, "name", None)
    if isinstance(name, str):
        return name
    if not isinstance(unit, type) and not hasattr(unit, "__name__"):
        unit = type(unit)
    return _CAMEL_BOUNDARY.sub("_", getattr(unit, "__name__", repr(unit))).lower()


class Middleware(ABC):
    """
    Base class for units in an action chain.

    Units are constructed by the chain compiler as
    ``Unit(app, env, *args)`` and then invoked with the environment.

    Contract:
    - call(env) performs the unit's work
    - calling self.app(env) continues the chain
    - returning without calling self.app(env) stops the chain
    - raising propagates to ErrorHalt at the head of the chain

    Subclasses taking construction arguments accept them after ``env``:

        class Greet(Middleware):
            def __init__(self, app, env, greeting):
                super().__init__(app, env)
                self.greeting = greeting

            def call(self, env):
                env["greeting"] = self.greeting
                return self.app(env)
    """

    def __init__(self, app: App, env: Environment | Any):
        self.app = app
        self.env = env

    @property
    def name(self) -> str:
        """Name used in logging and the environment audit trail."""
        return unit_name_of(type(self))

    @abstractmethod
    def call(self, env: Environment | Any) -> Any:
        """
        Run this unit.

        Args:
            env: The shared environment

        Returns:
            Whatever the unit chooses; usually the result of self.app(env)
        """
        ...

    def __call__(self, env: Environment | Any) -> Any:
        return self.call(env)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"


class PassthroughMiddleware(Middleware):
    """
    A unit that only continues the chain.

    Useful for testing and as a placeholder.
    """

    def call(self, env: Environment | Any) -> Any:
        return self.app(env)


class Terminal:
    """The implicit last executable of every chain. Does nothing."""

    name = "terminal"

    def __call__(self, env: Environment | Any) -> None:
        return None

    def __repr__(self) -> str:
        return "Terminal()"
