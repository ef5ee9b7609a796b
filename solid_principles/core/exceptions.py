"""
Custom exceptions for the demos.
Following SOLID principles - centralized error handling.
"""

from typing import Optional


class InvalidArgumentError(ValueError):
    """
    Raised when a required argument is missing or empty.
    Used by entity constructors and specification combinators.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class UnsupportedOperationError(NotImplementedError):
    """
    Raised when a device is asked for a capability it does not have.
    This is what a fat interface forces on its smaller implementers.
    """

    pass
