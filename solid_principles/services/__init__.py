# Services package initialization
# This file makes the services directory a Python package
# and allows importing service modules

from . import geometry_service
from . import machines
from . import product_filter

__all__ = [
    "geometry_service",
    "machines",
    "product_filter",
]
