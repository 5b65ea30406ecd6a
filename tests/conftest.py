import pytest

from qlisp.builtins import register
from qlisp.evaluation.evaluator import evaluate
from qlisp.interpreter import Interpreter
from qlisp.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded, no prelude."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def run(env):
    """Evaluate each line in order against `env` and return the display form of the last result."""
    def _run(*lines: str) -> str:
        result = None
        for line in lines:
            result = evaluate(env, line)
        return str(result)
    return _run


@pytest.fixture(scope="module")
def interp():
    """Interpreter with the bundled standard library loaded."""
    return Interpreter()
