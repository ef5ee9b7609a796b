"""
Product filtering, before and after applying the Open/Closed Principle.

ProductFilter grows a new method every time a criterion is added.
BetterFilter never changes: callers extend it by passing new specifications.
"""

from typing import Iterable, Iterator

from ..core.logging_config import get_logger
from ..core.validation import require_instance, require_not_none
from ..domain.entities import Color, Product, Size
from ..domain.interfaces import IFilter, ISpecification

logger = get_logger(__name__)


class ProductFilter:
    """Criterion-specific filter methods. Closed to extension."""

    def filter_by_color(
        self, products: Iterable[Product], color: Color
    ) -> Iterator[Product]:
        return (p for p in products if p.color == color)

    def filter_by_size(self, products: Iterable[Product], size: Size) -> Iterator[Product]:
        return (p for p in products if p.size == size)

    def filter_by_size_and_color(
        self, products: Iterable[Product], size: Size, color: Color
    ) -> Iterator[Product]:
        return (p for p in products if p.size == size and p.color == color)


class BetterFilter(IFilter[Product]):
    def filter(
        self, items: Iterable[Product], spec: ISpecification[Product]
    ) -> Iterator[Product]:
        """Lazily yield items satisfying spec, preserving input order."""
        require_not_none(items, "items")
        require_instance(spec, ISpecification, "spec")
        logger.debug("Filtering products", extra={"context": {"spec": repr(spec)}})
        return filter(spec.is_satisfied, items)
