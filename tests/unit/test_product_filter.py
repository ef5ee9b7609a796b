"""
Unit tests for ProductFilter and BetterFilter.
"""

import types

import pytest

from solid_principles.core.exceptions import InvalidArgumentError
from solid_principles.domain.entities import Color, Product, Size
from solid_principles.domain.specifications import (
    AndSpecification,
    ColorSpecification,
    SizeSpecification,
)
from solid_principles.services.product_filter import BetterFilter, ProductFilter


class TestProductFilter:
    def test_filter_by_color(self, products, apple, tree):
        result = list(ProductFilter().filter_by_color(products, Color.GREEN))

        assert result == [apple, tree]

    def test_filter_by_size(self, products, tree, house):
        result = list(ProductFilter().filter_by_size(products, Size.LARGE))

        assert result == [tree, house]

    def test_filter_by_size_and_color(self, products, house):
        result = list(
            ProductFilter().filter_by_size_and_color(products, Size.LARGE, Color.BLUE)
        )

        assert result == [house]


class TestBetterFilter:
    def setup_method(self):
        self.bf = BetterFilter()

    def test_single_specification_returns_matching_subset(self, products, apple, tree):
        result = list(self.bf.filter(products, ColorSpecification(Color.GREEN)))

        assert result == [apple, tree]

    def test_conjunction_returns_intersection(self, products, house):
        spec = AndSpecification(
            ColorSpecification(Color.BLUE), SizeSpecification(Size.LARGE)
        )

        assert list(self.bf.filter(products, spec)) == [house]

    def test_matches_old_filter(self, products):
        old = list(ProductFilter().filter_by_color(products, Color.GREEN))
        new = list(self.bf.filter(products, ColorSpecification(Color.GREEN)))

        assert old == new

    def test_no_match_returns_empty(self, products):
        assert list(self.bf.filter(products, SizeSpecification(Size.YUGE))) == []

    def test_preserves_input_order(self):
        items = [
            Product(name, Color.RED, Size.MEDIUM) for name in ("c", "a", "b")
        ]

        result = self.bf.filter(items, ColorSpecification(Color.RED))

        assert [p.name for p in result] == ["c", "a", "b"]

    def test_does_not_mutate_input(self, products):
        before = list(products)

        list(self.bf.filter(products, ColorSpecification(Color.BLUE)))

        assert products == before

    def test_filter_is_lazy(self):
        seen = []

        def catalogue():
            for name in ("a", "b", "c"):
                seen.append(name)
                yield Product(name, Color.RED, Size.SMALL)

        result = self.bf.filter(catalogue(), ColorSpecification(Color.RED))

        assert seen == []
        assert next(iter(result)).name == "a"
        assert seen == ["a"]

    def test_returns_iterator_not_list(self, products):
        result = self.bf.filter(products, ColorSpecification(Color.RED))

        assert not isinstance(result, list)
        assert iter(result) is result

    def test_missing_specification_rejected(self, products):
        with pytest.raises(InvalidArgumentError, match="spec is required"):
            self.bf.filter(products, None)

    def test_plain_callable_is_not_a_specification(self, products):
        with pytest.raises(InvalidArgumentError):
            self.bf.filter(products, types.SimpleNamespace(is_satisfied=bool))
