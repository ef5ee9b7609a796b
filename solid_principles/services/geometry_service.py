from ..domain.entities import Rectangle


def area(rectangle: Rectangle) -> int:
    return rectangle.width * rectangle.height


def describe(rectangle: Rectangle) -> str:
    """Render a rectangle together with its area."""
    return f"{rectangle} has area: {area(rectangle)}"
