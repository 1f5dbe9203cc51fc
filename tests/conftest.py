"""
Pytest configuration and fixtures for actionstack tests.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to path for imports
# This allows `from actionstack.action import ...` to work
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from actionstack.action import Environment, Middleware  # noqa: E402
from actionstack.config import get_settings  # noqa: E402


class Recorder(Middleware):
    """Test unit that records its label before continuing the chain."""

    def __init__(self, app, env, label, log):
        super().__init__(app, env)
        self.label = label
        self.log = log

    @property
    def name(self) -> str:
        return self.label

    def call(self, env):
        self.log.append(self.label)
        return self.app(env)


class Stopper(Middleware):
    """Test unit that records its label and does not continue."""

    def __init__(self, app, env, label, log):
        super().__init__(app, env)
        self.label = label
        self.log = log

    @property
    def name(self) -> str:
        return self.label

    def call(self, env):
        self.log.append(self.label)
        return "stopped"


class Exploder(Middleware):
    """Test unit that records a partial effect, then raises."""

    def __init__(self, app, env, label, log):
        super().__init__(app, env)
        self.label = label
        self.log = log

    @property
    def name(self) -> str:
        return self.label

    def call(self, env):
        self.log.append(f"{self.label}:start")
        raise ValueError(f"{self.label} exploded")


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached; reset them around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def env() -> Environment:
    """Create a fresh environment for each test."""
    return Environment()


@pytest.fixture
def log() -> list:
    """Externally observable execution log."""
    return []
