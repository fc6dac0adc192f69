# products/serializers/__init__.py

from .product import ProductSerializer
from .tax import TaxSerializer

__all__ = [
    "ProductSerializer",
    "TaxSerializer",
]
