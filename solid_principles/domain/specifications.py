"""
Product specifications.

New filtering criteria are added as new specification classes; nothing
that consumes an ISpecification has to change (Open/Closed Principle).
"""

from typing import TypeVar

from .entities import Color, Product, Size
from .interfaces import ISpecification
from ..core.validation import require_instance, require_non_empty, require_not_none

T = TypeVar("T")


class ColorSpecification(ISpecification[Product]):
    """Matches products of one color."""

    def __init__(self, color: Color):
        self.color = require_instance(color, Color, "color")

    def is_satisfied(self, item: Product) -> bool:
        return item.color == self.color

    def __repr__(self) -> str:
        return f"ColorSpecification({self.color.value})"


class SizeSpecification(ISpecification[Product]):
    """Matches products of one size."""

    def __init__(self, size: Size):
        self.size = require_instance(size, Size, "size")

    def is_satisfied(self, item: Product) -> bool:
        return item.size == self.size

    def __repr__(self) -> str:
        return f"SizeSpecification({self.size.value})"


class NameSpecification(ISpecification[Product]):
    """Matches products by name, ignoring case."""

    def __init__(self, name: str):
        self.name = require_non_empty(name, "name")

    def is_satisfied(self, item: Product) -> bool:
        return item.name.casefold() == self.name.casefold()

    def __repr__(self) -> str:
        return f"NameSpecification({self.name!r})"


class AndSpecification(ISpecification[T]):
    """Combinator: satisfied only when both specifications are.

    The second specification is not evaluated when the first one fails.
    """

    def __init__(self, first: ISpecification[T], second: ISpecification[T]):
        self.first = require_not_none(first, "first")
        self.second = require_not_none(second, "second")

    def is_satisfied(self, item: T) -> bool:
        return self.first.is_satisfied(item) and self.second.is_satisfied(item)

    def __repr__(self) -> str:
        return f"AndSpecification({self.first!r}, {self.second!r})"
