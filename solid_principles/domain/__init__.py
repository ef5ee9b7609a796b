"""
Domain package - Pure business logic layer.

This package contains:
- entities.py: Journal, shapes, products and documents
- interfaces.py: Specification, filter, machine and persistence contracts
- specifications.py: Concrete product specifications and the AND combinator

Following SOLID principles:
- Single Responsibility: Each module has one purpose
- Open/Closed: New specifications extend filtering without modification
- Interface Segregation: Machine capabilities are split per operation
"""

from .entities import (
    Color,
    Document,
    Journal,
    JournalEntry,
    Product,
    Rectangle,
    Size,
    Square,
)
from .interfaces import (
    IFax,
    IFilter,
    IJournalPersistence,
    IMachine,
    IMultiFunctionDevice,
    IPrinter,
    IScanner,
    ISpecification,
)
from .specifications import (
    AndSpecification,
    ColorSpecification,
    NameSpecification,
    SizeSpecification,
)

__all__ = [
    # Domain entities
    "Journal",
    "JournalEntry",
    "Rectangle",
    "Square",
    "Color",
    "Size",
    "Product",
    "Document",
    # Interfaces
    "ISpecification",
    "IFilter",
    "IMachine",
    "IPrinter",
    "IScanner",
    "IFax",
    "IMultiFunctionDevice",
    "IJournalPersistence",
    # Specifications
    "ColorSpecification",
    "SizeSpecification",
    "NameSpecification",
    "AndSpecification",
]
