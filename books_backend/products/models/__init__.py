"""
PATH: products/models/__init__.py

Products models export surface.
"""

from .product import Product
from .tax import Tax

__all__ = [
    "Product",
    "Tax",
]
