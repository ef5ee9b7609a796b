"""
Unit tests for product specifications and the AND combinator.
"""

import pytest

from solid_principles.core.exceptions import InvalidArgumentError
from solid_principles.domain.entities import Color, Product, Size
from solid_principles.domain.interfaces import ISpecification
from solid_principles.domain.specifications import (
    AndSpecification,
    ColorSpecification,
    NameSpecification,
    SizeSpecification,
)
from tests.factories.device_factories import SpecificationFactory


class TestProductEntity:
    def test_product_creation_valid(self, apple):
        assert apple.name == "Apple"
        assert apple.color is Color.GREEN
        assert apple.size is Size.SMALL

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_product_requires_name(self, name):
        with pytest.raises(InvalidArgumentError):
            Product(name, Color.RED, Size.SMALL)

    def test_product_rejects_unknown_color(self):
        with pytest.raises(InvalidArgumentError, match="color must be a Color"):
            Product("Ball", "Red", Size.SMALL)

    def test_product_is_immutable(self, apple):
        with pytest.raises(AttributeError):
            apple.name = "Pear"


class TestSimpleSpecifications:
    def test_color_specification(self, apple, house):
        spec = ColorSpecification(Color.GREEN)

        assert spec.is_satisfied(apple) is True
        assert spec.is_satisfied(house) is False

    def test_size_specification(self, tree, apple):
        spec = SizeSpecification(Size.LARGE)

        assert spec.is_satisfied(tree) is True
        assert spec.is_satisfied(apple) is False

    def test_name_specification_ignores_case(self, house):
        assert NameSpecification("HOUSE").is_satisfied(house) is True
        assert NameSpecification("Hut").is_satisfied(house) is False

    def test_color_specification_requires_color(self):
        with pytest.raises(InvalidArgumentError):
            ColorSpecification(None)

    def test_size_specification_requires_size(self):
        with pytest.raises(InvalidArgumentError):
            SizeSpecification("Large")

    def test_specifications_implement_interface(self):
        assert isinstance(ColorSpecification(Color.RED), ISpecification)
        assert isinstance(SizeSpecification(Size.YUGE), ISpecification)


class TestAndSpecification:
    def test_both_must_match(self, house, tree, apple):
        spec = AndSpecification(
            ColorSpecification(Color.BLUE), SizeSpecification(Size.LARGE)
        )

        assert spec.is_satisfied(house) is True
        assert spec.is_satisfied(tree) is False
        assert spec.is_satisfied(apple) is False

    def test_ampersand_builds_conjunction(self, house):
        spec = ColorSpecification(Color.BLUE) & SizeSpecification(Size.LARGE)

        assert isinstance(spec, AndSpecification)
        assert spec.is_satisfied(house) is True

    def test_short_circuits_when_first_fails(self, apple):
        first = SpecificationFactory.create_mock(False)
        second = SpecificationFactory.create_mock(True)

        assert AndSpecification(first, second).is_satisfied(apple) is False

        first.is_satisfied.assert_called_once_with(apple)
        second.is_satisfied.assert_not_called()

    def test_evaluates_second_when_first_passes(self, apple):
        first = SpecificationFactory.create_mock(True)
        second = SpecificationFactory.create_mock(True)

        assert AndSpecification(first, second).is_satisfied(apple) is True

        second.is_satisfied.assert_called_once_with(apple)

    @pytest.mark.parametrize("position", ["first", "second"])
    def test_none_operand_rejected(self, position):
        spec = ColorSpecification(Color.RED)
        operands = {"first": spec, "second": spec}
        operands[position] = None

        with pytest.raises(InvalidArgumentError, match=f"{position} is required"):
            AndSpecification(operands["first"], operands["second"])

    def test_nested_conjunctions(self):
        big_green_tree = Product("Tree", Color.GREEN, Size.LARGE)
        spec = (
            ColorSpecification(Color.GREEN)
            & SizeSpecification(Size.LARGE)
            & NameSpecification("tree")
        )

        assert spec.is_satisfied(big_green_tree) is True
