"""
Centralized configuration module for the demo runner.

Settings come from environment variables; a local .env file is loaded once
at import time so developers can keep overrides out of their shell profile.
"""

import logging
import os

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()

TRUTHY_VALUES = ("true", "1", "yes")
FALSY_VALUES = ("false", "0", "no")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _get_flag(name: str, default: bool) -> bool:
    """Read a boolean flag, warning and falling back on unknown values."""
    raw = os.getenv(name)
    if raw is None:
        return default

    value = raw.strip().lower()
    if value in TRUTHY_VALUES:
        return True
    if value in FALSY_VALUES:
        return False

    logger.warning(
        f"Invalid value '{raw}' for {name}. Falling back to {default}.",
        extra={"context": {"variable": name, "value": raw}},
    )
    return default


# ===========================
# Logging Configuration
# ===========================


def get_log_level() -> str:
    """
    Get the log level name from the environment.

    Environment Variables:
        SOLID_LOG_LEVEL: One of DEBUG, INFO, WARNING, ERROR, CRITICAL
            Default: 'INFO'
    """
    level = os.getenv("SOLID_LOG_LEVEL", "INFO").strip().upper()
    if level not in VALID_LOG_LEVELS:
        logger.warning(
            f"Invalid log level '{level}' in SOLID_LOG_LEVEL. Falling back to INFO.",
            extra={"context": {"value": level}},
        )
        return "INFO"
    return level


def get_log_to_file() -> bool:
    """Whether logs are also written to a rotating file (SOLID_LOG_TO_FILE)."""
    return _get_flag("SOLID_LOG_TO_FILE", False)


def get_log_json() -> bool:
    """Whether console logs are emitted as JSON (SOLID_LOG_JSON)."""
    return _get_flag("SOLID_LOG_JSON", False)


# ===========================
# Journal Configuration
# ===========================


def get_journal_path() -> str:
    """
    Get the default file the journal demo saves to.

    Environment Variables:
        SOLID_JOURNAL_PATH: Target file for the journal dump
            Default: 'journal.txt' (relative to the working directory)
    """
    path = os.getenv("SOLID_JOURNAL_PATH", "").strip()
    return path or "journal.txt"
