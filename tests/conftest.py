import pytest

from tinylisp.builtin import env_builtin
from tinylisp.interpreter import Interpreter
from tinylisp.types.environment import Environment


# Most tests need either a bare root environment with the builtins registered
# (to drive evaluate() directly) or a whole interpreter session.


@pytest.fixture
def env():
    e = Environment()
    env_builtin.register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()
