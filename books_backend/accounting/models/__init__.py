# accounting/models/__init__.py

"""
ACCOUNTING MODELS PACKAGE EXPORTS

Note:
- Keep this file *imports-only* (no business logic).
- Do NOT import services from models anywhere (models must stay pure).
"""

from accounting.models.account import Account
from accounting.models.documents import (
    BillDocument,
    BillLineDocument,
    DocumentLine,
    OrderDocument,
    PaymentDocument,
)

__all__ = [
    "Account",
    "OrderDocument",
    "DocumentLine",
    "BillDocument",
    "BillLineDocument",
    "PaymentDocument",
]
