"""
SALES MODELS EXPORT SURFACE
"""

from .bill import SalesBill, SalesBillLine
from .order import SalesOrder, SalesOrderLine
from .payment import SalesPayment

__all__ = [
    "SalesOrder",
    "SalesOrderLine",
    "SalesBill",
    "SalesBillLine",
    "SalesPayment",
]
