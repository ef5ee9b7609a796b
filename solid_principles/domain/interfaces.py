"""
Abstract interfaces following Interface Segregation Principle.

These interfaces define contracts without implementation details,
enabling dependency injection and easier testing.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Iterator, TypeVar

from .entities import Document, Journal

T = TypeVar("T")


# ===========================
# Open/Closed: specifications and filters
# ===========================


class ISpecification(ABC, Generic[T]):
    """Predicate deciding whether a single item meets a criterion."""

    @abstractmethod
    def is_satisfied(self, item: T) -> bool:
        """Return True when the item satisfies this specification."""
        pass

    def __and__(self, other: "ISpecification[T]") -> "ISpecification[T]":
        from .specifications import AndSpecification

        return AndSpecification(self, other)


class IFilter(ABC, Generic[T]):
    """Filter items against any specification - open for extension."""

    @abstractmethod
    def filter(self, items: Iterable[T], spec: ISpecification[T]) -> Iterator[T]:
        """Yield the items satisfying the specification, in input order."""
        pass


# ===========================
# Interface Segregation: machines
# ===========================


class IMachine(ABC):
    """
    Fat interface with every capability.
    Implementers that only print are still forced to define scan and fax.
    """

    @abstractmethod
    def print(self, document: Document) -> str:
        """Print a document."""
        pass

    @abstractmethod
    def scan(self, document: Document) -> str:
        """Scan a document."""
        pass

    @abstractmethod
    def fax(self, document: Document) -> str:
        """Fax a document."""
        pass


class IPrinter(ABC):
    """Interface for printing only - Interface Segregation Principle."""

    @abstractmethod
    def print(self, document: Document) -> str:
        """Print a document."""
        pass


class IScanner(ABC):
    """Interface for scanning only - Interface Segregation Principle."""

    @abstractmethod
    def scan(self, document: Document) -> str:
        """Scan a document."""
        pass


class IFax(ABC):
    """Interface for faxing only - Interface Segregation Principle."""

    @abstractmethod
    def fax(self, document: Document) -> str:
        """Fax a document."""
        pass


class IMultiFunctionDevice(IPrinter, IScanner):
    """Device combining print and scan capabilities."""

    pass


# ===========================
# Single Responsibility: persistence
# ===========================


class IJournalPersistence(ABC):
    """Interface for saving journals - kept out of the Journal itself."""

    @abstractmethod
    def save_to_file(
        self, journal: Journal, filename: str, overwrite: bool = False
    ) -> bool:
        """Write the journal to a file. Return False when nothing was written."""
        pass
