# products/views/__init__.py

"""
Products views package exports.

Purpose:
- Central export point for router imports (ProductViewSet, TaxViewSet).
"""

from .product import ProductViewSet
from .tax import TaxViewSet

__all__ = [
    "ProductViewSet",
    "TaxViewSet",
]
