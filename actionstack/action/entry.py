"""
Entry: one registered unit awaiting compilation.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .middleware import App, unit_name_of


@dataclass(frozen=True)
class Entry:
    """
    A unit descriptor with its construction arguments.

    Attributes:
        unit: Unit class or factory, called as unit(app, env, *args)
        args: Extra positional construction arguments
        block: Optional callable passed as ``block=`` when set
    """

    unit: Callable[..., App]
    args: tuple[Any, ...] = ()
    block: Callable[..., Any] | None = None

    @property
    def name(self) -> str:
        return unit_name_of(self.unit)

    def build(self, app: App, env: Any) -> App:
        """Construct the unit with the next executable and the environment."""
        if self.block is None:
            return self.unit(app, env, *self.args)
        return self.unit(app, env, *self.args, block=self.block)
