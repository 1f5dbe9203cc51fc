"""
actionstack - a declarative builder for ordered, composable action chains.

Units (middleware) are registered on a Builder ahead of time. At run time
the stack is compiled into one nested call chain in which every unit wraps
the rest of the chain, with ErrorHalt at the head as the failure boundary.

Quick Start:
    >>> from actionstack import Builder, Environment, Middleware
    >>>
    >>> class Hello(Middleware):
    ...     def call(self, env):
    ...         env["greeting"] = "hello"
    ...         return self.app(env)
    >>>
    >>> env = Environment()
    >>> Builder(lambda b: b.use(Hello)).call(env)
    >>> env["greeting"]
    'hello'
"""

__version__ = "0.1.0"
__license__ = "MIT"

from actionstack.action import (
    ActionChain,
    ActionHalt,
    Builder,
    Environment,
    ErrorHalt,
    Middleware,
    compile_chain,
    run_chain,
)
from actionstack.config import ActionSettings, get_settings

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Core
    "Builder",
    "ActionChain",
    "compile_chain",
    "run_chain",
    "Middleware",
    "ErrorHalt",
    "ActionHalt",
    "Environment",
    # Config
    "ActionSettings",
    "get_settings",
]
