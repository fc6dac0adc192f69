# accounting/api/serializers/__init__.py

from accounting.api.serializers.accounts import AccountListSerializer
from accounting.api.serializers.documents import (
    BillCreateBaseSerializer,
    BillLineInputSerializer,
    BillReadSerializer,
    OrderCreateSerializer,
    OrderLineInputSerializer,
    OrderReadSerializer,
    PaymentReadSerializer,
    SettlementCreateSerializer,
)
from accounting.api.serializers.ledger_entries import (
    LedgerEntrySerializer,
    LedgerSerializer,
    PartnerBalanceSerializer,
)

__all__ = [
    "AccountListSerializer",
    "OrderLineInputSerializer",
    "OrderCreateSerializer",
    "OrderReadSerializer",
    "BillLineInputSerializer",
    "BillCreateBaseSerializer",
    "BillReadSerializer",
    "SettlementCreateSerializer",
    "PaymentReadSerializer",
    "LedgerEntrySerializer",
    "PartnerBalanceSerializer",
    "LedgerSerializer",
]
