import pytest

from egg.builtin.env_builtin import register
from egg.interpreter import Interpreter
from egg.types.environment import Environment


@pytest.fixture
def env():
    """Fresh program scope: a child frame of a new global environment."""
    root = Environment()
    register(root)
    return root.child()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture(autouse=True)
def _no_recursion_limit_override(monkeypatch):
    # Keep EGG_RECURSION_LIMIT and EGG_PROMPT from the developer's shell out of the tests
    monkeypatch.delenv("EGG_RECURSION_LIMIT", raising=False)
    monkeypatch.delenv("EGG_PROMPT", raising=False)
