import pytest

from lispy.builtin.prelude import make_prelude
from lispy.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh root environment with every builtin installed."""
    return make_prelude()


@pytest.fixture
def interp():
    return Interpreter()
