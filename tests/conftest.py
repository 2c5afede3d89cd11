import pytest

from lisp_compute.builtin.env_builtin import register
from lisp_compute.interpreter import Interpreter
from lisp_compute.types.environment import Environment


@pytest.fixture(autouse=True)
def _clear_config_env(monkeypatch):
    # Tests must not depend on the caller's shell configuration
    monkeypatch.delenv("LISP_COMPUTE_MAX_DEPTH", raising=False)
    monkeypatch.delenv("LISP_COMPUTE_EXAMPLES_PATH", raising=False)


@pytest.fixture
def env():
    """Fresh, unfrozen environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()
