# accounting/api/urls.py

from django.urls import path

from accounting.api.views import (
    AccountListView,
    BalanceSheetView,
    DashboardSummaryView,
    LedgerView,
    ProfitAndLossView,
)

urlpatterns = [
    # Reports
    path("ledger/", LedgerView.as_view(), name="ledger"),
    path("profit-loss/", ProfitAndLossView.as_view(), name="profit-loss"),
    path("balance-sheet/", BalanceSheetView.as_view(), name="balance-sheet"),
    path("dashboard-summary/", DashboardSummaryView.as_view(), name="dashboard-summary"),
    # Master data (read-only)
    path("accounts/", AccountListView.as_view(), name="accounts"),
]
