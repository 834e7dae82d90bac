import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_logging():
    """The CLI reconfigures logging; keep tests independent of each other."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()
