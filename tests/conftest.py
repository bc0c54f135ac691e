import io

import pytest

from egg.builtin.env_builtin import register
from egg.interpreter import Interpreter
from egg.types.environment import Environment


@pytest.fixture
def out():
    """Captures everything Egg's print writes."""
    return io.StringIO()


@pytest.fixture
def env(out):
    """Fresh program frame chained onto a global frame with builtins loaded."""
    return Environment(outer=register(Environment(), out))


@pytest.fixture
def interp(out):
    return Interpreter(output=out)
