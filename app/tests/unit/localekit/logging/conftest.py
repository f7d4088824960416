"""Fixtures for localekit logging tests."""

import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo configure_logging side effects after each test."""
    root_level = logging.root.level
    root_handlers = list(logging.root.handlers)
    yield
    structlog.reset_defaults()
    logging.root.handlers[:] = root_handlers
    logging.root.setLevel(root_level)
