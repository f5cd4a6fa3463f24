import io

import pytest

from teko.interpreter import Interpreter

# Tests marked `slow` (e.g. the million-iteration tail-call loop) only run
# with --runslow.


def pytest_addoption(parser):
    parser.addoption("--runslow", action="store_true", default=False, help="run slow tests")


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running test, needs --runslow")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--runslow"):
        return
    skip_slow = pytest.mark.skip(reason="needs --runslow")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def stdout():
    return io.StringIO()


@pytest.fixture
def interp(stdout):
    """A fresh interpreter whose print output goes to the `stdout` fixture."""
    return Interpreter(stdout=stdout)
