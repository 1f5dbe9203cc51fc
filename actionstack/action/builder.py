"""
Action Builder for actionstack.

Declares an ordered stack of middleware ahead of time and compiles it
into an action chain on demand.

Usage:
    def configure(b):
        b.use(LoadConfig)
        b.use(Validate, "strict")

    builder = Builder(configure)
    builder.use(Provision, "small")
    builder.call(Environment())

A Builder passed to use() is merged: its entries are spliced into this
builder in order and the other builder is not referenced afterwards.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterator

from .chain import ActionChain, compile_chain, run_chain
from .entry import Entry
from .error_halt import ErrorHalt
from .middleware import App

logger = logging.getLogger(__name__)


class Builder:
    """
    Ordered registry of middleware entries.

    Insertion order is execution order. ErrorHalt (or the unit given as
    ``error_halt``) is prepended at compile time and always runs first.
    """

    def __init__(
        self,
        config: Callable[[Builder], Any] | None = None,
        *,
        error_halt: Callable[..., App] = ErrorHalt,
    ) -> None:
        """
        Initialize the builder.

        Args:
            config: Called immediately with the new builder, for
                declaring the stack at construction time
            error_halt: Fault-containment unit for compiled chains
        """
        self._stack: list[Entry] = []
        self.error_halt = error_halt
        if config is not None:
            config(self)

    @property
    def stack(self) -> list[Entry]:
        """The current entries in order. A copy; mutating it has no effect."""
        return list(self._stack)

    @property
    def entries(self) -> list[Entry]:
        """Alias of stack."""
        return self.stack

    @property
    def unit_names(self) -> list[str]:
        return [entry.name for entry in self._stack]

    def use(
        self,
        unit: Callable[..., App] | Builder,
        *args: Any,
        block: Callable[..., Any] | None = None,
    ) -> Builder:
        """
        Add a unit to the stack, or merge another builder's stack.

        Extra args and block are saved and passed to the unit's
        constructor after (app, env).
        """
        if isinstance(unit, Builder):
            self._stack.extend(unit._stack)
            logger.debug(f"Merged {len(unit)} entries into builder")
        else:
            self._stack.append(Entry(unit, args, block))
        return self

    def to_app(self, env: Any) -> ActionChain:
        """Convert the stack to a runnable action chain."""
        return compile_chain(self._stack, env, error_halt=self.error_halt)

    def call(self, env: Any) -> Any:
        """Compile the stack and run it with the environment."""
        return run_chain(self._stack, env, error_halt=self.error_halt)

    def __call__(self, env: Any) -> Any:
        return self.call(env)

    def __len__(self) -> int:
        return len(self._stack)

    def __iter__(self) -> Iterator[Entry]:
        return iter(list(self._stack))

    def __repr__(self) -> str:
        return f"Builder(units={self.unit_names})"
