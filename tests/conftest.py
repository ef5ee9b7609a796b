"""
Central pytest configuration for the SOLID demo tests.

This file provides common fixtures, test markers, and setup
for both unit and integration tests.
"""

import logging

import pytest

from tests.config.markers import pytest_collection_modifyitems, pytest_configure
from tests.fixtures.domain_fixtures import *  # noqa: F401,F403


@pytest.fixture
def clean_logging():
    """Clean up logging handlers before and after each test."""
    root_logger = logging.getLogger()

    original_handlers = root_logger.handlers[:]
    original_level = root_logger.level

    yield root_logger

    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    for handler in original_handlers:
        root_logger.addHandler(handler)

    root_logger.setLevel(original_level)
    logging.getLogger("solid_principles").setLevel(logging.NOTSET)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove SOLID_* variables so config getters see their defaults."""
    for name in (
        "SOLID_LOG_LEVEL",
        "SOLID_LOG_TO_FILE",
        "SOLID_LOG_JSON",
        "SOLID_JOURNAL_PATH",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
