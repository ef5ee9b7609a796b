"""
Common validation utilities for the demo entities.

This module provides consistent required-argument checks so constructors
fail immediately with an InvalidArgumentError instead of building objects
in a broken state.
"""

import logging
from typing import Any, Tuple, Type, TypeVar, Union

from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def require_not_none(value: T, field_name: str) -> T:
    """Validate that a required argument was supplied."""
    if value is None:
        logger.warning(
            "Validation error: missing argument",
            extra={"context": {"field": field_name}},
        )
        raise InvalidArgumentError(f"{field_name} is required", field_name)
    return value


def require_non_empty(value: Any, field_name: str) -> str:
    """Validate that a required string is present and not blank."""
    require_not_none(value, field_name)
    if not isinstance(value, str):
        logger.warning(
            "Validation error: expected text",
            extra={"context": {"field": field_name, "type": type(value).__name__}},
        )
        raise InvalidArgumentError(f"{field_name} must be a string", field_name)
    if value.strip() == "":
        logger.warning(
            "Validation error: empty argument",
            extra={"context": {"field": field_name}},
        )
        raise InvalidArgumentError(f"{field_name} cannot be empty", field_name)
    return value


def require_instance(
    value: Any, expected: Union[Type, Tuple[Type, ...]], field_name: str
) -> Any:
    """Validate that an argument is present and of the expected type."""
    require_not_none(value, field_name)
    if not isinstance(value, expected):
        names = (
            ", ".join(t.__name__ for t in expected)
            if isinstance(expected, tuple)
            else expected.__name__
        )
        logger.warning(
            "Validation error: wrong type",
            extra={
                "context": {
                    "field": field_name,
                    "expected": names,
                    "actual": type(value).__name__,
                }
            },
        )
        raise InvalidArgumentError(f"{field_name} must be a {names}", field_name)
    return value
