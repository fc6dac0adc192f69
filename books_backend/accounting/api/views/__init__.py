# accounting/api/views/__init__.py

"""
accounting.api.views package

Expose public API views cleanly without making routing/imports fragile.

Important:
- Do NOT import accounting.api.urls from here to avoid circular imports.
"""

# Read-only reports
from accounting.api.views.balance_sheet import BalanceSheetView
from accounting.api.views.dashboard import DashboardSummaryView
from accounting.api.views.ledger import LedgerView
from accounting.api.views.profit_and_loss import ProfitAndLossView

# Master data
from accounting.api.views.accounts import AccountListView

__all__ = [
    "BalanceSheetView",
    "DashboardSummaryView",
    "LedgerView",
    "ProfitAndLossView",
    "AccountListView",
]
