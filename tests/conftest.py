import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """run_app reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
