"""
actionstack action chains.

Core Components:
- Builder: ordered registry of middleware entries
- compile_chain / run_chain: turn entries into a nested call chain
- Middleware: base class for units
- ErrorHalt: fault-containment unit prepended to every chain
- Environment: default shared state threaded through a chain
"""

from .builder import Builder
from .chain import ActionChain, compile_chain, run_chain
from .entry import Entry
from .environment import Environment, HaltRecord
from .error_halt import ErrorHalt, failing_unit_name
from .errors import ActionError, ActionHalt
from .middleware import App, Middleware, PassthroughMiddleware, Terminal, unit_name_of
from .observability import ChainLogger, JSONLogger

__all__ = [
    # Core
    "Builder",
    "Entry",
    "ActionChain",
    "compile_chain",
    "run_chain",
    # Units
    "App",
    "Middleware",
    "PassthroughMiddleware",
    "Terminal",
    "ErrorHalt",
    "failing_unit_name",
    "unit_name_of",
    # Environment
    "Environment",
    "HaltRecord",
    # Errors
    "ActionError",
    "ActionHalt",
    # Observability
    "JSONLogger",
    "ChainLogger",
]
