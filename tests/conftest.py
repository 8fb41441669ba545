import pytest

from scheme.interpreter import Interpreter
from scheme.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with a single empty root frame."""
    return Environment()


@pytest.fixture
def interp():
    """Fresh interpreter; definitions persist across interpret() calls within a test."""
    return Interpreter()
