"""
Test configuration package initialization.

Exports the pytest hooks that register and apply markers.
"""

from .markers import pytest_collection_modifyitems, pytest_configure

__all__ = [
    "pytest_configure",
    "pytest_collection_modifyitems",
]
