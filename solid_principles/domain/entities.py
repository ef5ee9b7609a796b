"""
Domain entities - Pure business logic, no framework dependencies.

Following SOLID principles:
- Single Responsibility: Each entity represents one concept. The journal
  only keeps entries; saving it is the repository's job.
- Liskov Substitution: A Square can stand in anywhere a Rectangle is used.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple

from ..core.exceptions import InvalidArgumentError
from ..core.logging_config import get_logger
from ..core.validation import require_instance, require_non_empty

logger = get_logger(__name__)


# ===========================
# Single Responsibility: Journal
# ===========================


@dataclass(frozen=True)
class JournalEntry:
    """A numbered line in a journal."""

    number: int
    text: str

    def __str__(self) -> str:
        return f"{self.number}: {self.text}"


class Journal:
    """In-memory journal of numbered entries.

    Numbers are handed out per journal, start at 1 and are never reused,
    so removing an entry leaves a gap in the numbering.
    """

    def __init__(self):
        self._entries: List[JournalEntry] = []
        self._count = 0

    def add_entry(self, text: str) -> int:
        """Append an entry and return its number."""
        require_instance(text, str, "text")
        self._count += 1
        self._entries.append(JournalEntry(self._count, text))
        logger.debug("Journal entry added", extra={"context": {"number": self._count}})
        return self._count

    def remove_entry(self, index: int) -> JournalEntry:
        """Remove the entry at a position (not a number) and return it."""
        if not 0 <= index < len(self._entries):
            raise IndexError(f"journal position {index} out of range")
        entry = self._entries.pop(index)
        logger.debug(
            "Journal entry removed",
            extra={"context": {"index": index, "number": entry.number}},
        )
        return entry

    @property
    def entries(self) -> Tuple[JournalEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[JournalEntry]:
        return iter(self._entries)

    def __str__(self) -> str:
        return "\n".join(str(entry) for entry in self._entries)


# ===========================
# Liskov Substitution: Rectangle / Square
# ===========================


def _check_dimension(value: int, field_name: str) -> int:
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{field_name} must be a int", field_name)
    require_instance(value, int, field_name)
    if value < 0:
        raise InvalidArgumentError(f"{field_name} cannot be negative", field_name)
    return value


class Rectangle:
    """Rectangle with independently settable width and height."""

    def __init__(self, width: int = 0, height: int = 0):
        self._width = 0
        self._height = 0
        # Go through the properties so subclasses see every assignment
        self.width = width
        self.height = height

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        self._width = _check_dimension(value, "width")

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: int) -> None:
        self._height = _check_dimension(value, "height")

    def __str__(self) -> str:
        return f"Width: {self.width}, Height: {self.height}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self.width}, height={self.height})"


class Square(Rectangle):
    """Rectangle whose sides always match.

    Both setters are overridden, so code holding a Square through a
    Rectangle reference still gets square behavior.
    """

    def __init__(self, side: int = 0):
        super().__init__(side, side)

    @Rectangle.width.setter
    def width(self, value: int) -> None:
        self._width = self._height = _check_dimension(value, "width")

    @Rectangle.height.setter
    def height(self, value: int) -> None:
        self._height = self._width = _check_dimension(value, "height")


# ===========================
# Open/Closed: Products
# ===========================


class Color(Enum):
    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"


class Size(Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    YUGE = "Yuge"


@dataclass(frozen=True)
class Product:
    """Domain entity for a product in the catalogue."""

    name: str
    color: Color
    size: Size

    def __post_init__(self):
        """Validate business rules."""
        require_non_empty(self.name, "name")
        require_instance(self.color, Color, "color")
        require_instance(self.size, Size, "size")


# ===========================
# Interface Segregation: Documents
# ===========================


@dataclass(frozen=True)
class Document:
    """Something a machine can print, scan or fax."""

    title: str = ""
    content: str = ""
