"""
Chain compiler for actionstack.

Turns an ordered list of entries into one nested call chain. Every unit
is built with the rest of the chain as its ``app``, so execution order
equals registration order:

    ErrorHalt(app=A(app=B(app=C(app=Terminal()))))

ErrorHalt is always prepended; it cannot be left out.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from .entry import Entry
from .error_halt import ErrorHalt
from .middleware import App, Terminal, unit_name_of
from .observability import ChainLogger

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionChain:
    """
    A compiled, re-invokable action chain.

    Attributes:
        app: The outermost executable (always the fault-containment unit)
        units: Constructed units in execution order, terminal excluded
    """

    app: App
    units: tuple[Any, ...]

    @property
    def unit_names(self) -> list[str]:
        return [unit_name_of(unit) for unit in self.units]

    def __call__(self, env: Any) -> Any:
        return self.app(env)

    def __repr__(self) -> str:
        return f"ActionChain(units={self.unit_names})"


def compile_chain(
    entries: Iterable[Entry],
    env: Any,
    *,
    error_halt: Callable[..., App] = ErrorHalt,
) -> ActionChain:
    """
    Compile entries into an ActionChain.

    Entries are not validated: a unit that cannot be constructed with
    ``(app, env, *args)`` raises here and the error reaches the caller
    unchanged.

    Args:
        entries: Entries in registration order
        env: The environment handed to every unit constructor
        error_halt: Fault-containment unit placed first in the chain

    Returns:
        The compiled chain
    """
    items = [Entry(error_halt), *entries]

    app: App = Terminal()
    units: list[Any] = []
    for entry in reversed(items):
        app = entry.build(app, env)
        units.append(app)
    units.reverse()

    chain = ActionChain(app=app, units=tuple(units))
    logger.debug(f"Compiled action chain: {chain.unit_names}")
    return chain


def run_chain(
    entries: Iterable[Entry],
    env: Any,
    *,
    error_halt: Callable[..., App] = ErrorHalt,
) -> Any:
    """
    Compile entries and invoke the chain once with the environment.

    Returns:
        Whatever the outermost unit returns
    """
    chain = compile_chain(entries, env, error_halt=error_halt)

    execution_id = getattr(env, "execution_id", None)
    chain_logger = ChainLogger(
        request_id=str(execution_id) if execution_id is not None else None
    )
    chain_logger.chain_started(chain.unit_names)

    start_time = time.perf_counter()
    try:
        result = chain(env)
    except BaseException as e:
        chain_logger.chain_failed(
            duration_ms=(time.perf_counter() - start_time) * 1000,
            error_type=type(e).__name__,
        )
        raise

    chain_logger.chain_completed(
        duration_ms=(time.perf_counter() - start_time) * 1000,
        halted=bool(getattr(env, "halted", False)),
    )
    return result
