import pytest

from cadr.builtin.env_builtin import register
from cadr.interpreter import Interpreter
from cadr.types.environment import Environment


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    # Tests never pick up a developer's local configuration
    monkeypatch.delenv("CADR_PRELUDE_PATH", raising=False)
    monkeypatch.delenv("CADR_RECURSION_LIMIT", raising=False)


@pytest.fixture
def interp():
    """A session without the prelude, so only the built-ins are bound."""
    return Interpreter(prelude=None)


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e
