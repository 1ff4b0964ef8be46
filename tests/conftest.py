"""
Global pytest fixtures for membytes tests.

This module provides:
- Fresh backing buffers for aliasing tests
- Display configuration reset between tests
- Logger state isolation
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_display_config():
    """Restore display defaults after every test."""
    from membytes.config import config

    config.reset()
    yield
    config.reset()


@pytest.fixture(autouse=True)
def restore_logger():
    """Keep handler/level changes made by a test from leaking into the next."""
    from membytes._logging import logger

    handlers = logger.handlers[:]
    level = logger.level
    yield
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)


@pytest.fixture
def two_bytes() -> bytearray:
    """The two-byte buffer the walkthrough starts from."""
    return bytearray([0, 3])


@pytest.fixture
def four_bytes() -> bytearray:
    """The four-byte buffer the walkthrough pins."""
    return bytearray([0, 2, 4, 6])


@pytest.fixture
def debug_caplog(caplog):
    """caplog with the membytes logger lowered to DEBUG.

    Read ``caplog.records`` in the test body; the list is replaced when the
    call phase starts.
    """
    caplog.set_level(logging.DEBUG, logger="membytes")
    return caplog
