"""Workspace-level pytest configuration and fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True, scope="function")
def isolate_logging_config():
    """Preserve and restore logger state around each test.

    CLI and logging tests call setup_logging(), which replaces handlers on the
    root and termgap loggers and turns off propagation. Restoring the state
    keeps caplog-based tests independent of execution order.
    """
    loggers = [logging.getLogger(), logging.getLogger("termgap")]
    saved = [
        (logger, list(logger.handlers), logger.level, logger.propagate, logger.disabled)
        for logger in loggers
    ]

    yield

    for logger, handlers, level, propagate, disabled in saved:
        logger.handlers[:] = handlers
        logger.setLevel(level)
        logger.propagate = propagate
        logger.disabled = disabled
