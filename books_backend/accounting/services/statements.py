# accounting/services/statements.py

"""
FINANCIAL STATEMENT SERVICE

Read-only aggregation over bills, payments and accounts.

Profit & Loss (cash basis):
- income      = sum(sales payments, type=receive)
- expense     = sum(vendor payments, type=send)
- profit_loss = income - expense

Balance sheet (simplified, no double entry):
- assets.cash_and_bank           = sum(Account.current_balance, type=Assets)
- assets.accounts_receivable     = sum(sales bills still POSTED)
- liabilities.accounts_payable   = sum(vendor bills still POSTED)
- equity.retained_earnings       = sum(sales bills) - sum(vendor bills)
- balance = assets - (liabilities + equity)   (diagnostic; not forced to 0)

Contract:
- major-unit amounts as 2dp strings, plus exact *_minor ints
- cancelled bills never count
"""

from __future__ import annotations

from datetime import date as date_cls
from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal

from django.db.models import Sum
from django.utils import timezone

from accounting.models import Account, BillDocument, PaymentDocument
from accounting.services.exceptions import DocumentValidationError
from accounting.services.flows import PURCHASE_FLOW, SALES_FLOW

TWOPLACES = Decimal("0.01")

DASHBOARD_WINDOWS = (
    ("last_1_day", 1),
    ("last_7_days", 7),
    ("last_30_days", 30),
)


def _q2(amount: Decimal) -> Decimal:
    return (amount or Decimal("0.00")).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def _to_major_str(amount: Decimal) -> str:
    return str(_q2(amount))


def _to_minor_int(amount: Decimal) -> int:
    return int((_q2(amount) * 100).to_integral_value(rounding=ROUND_HALF_UP))


def _money_pair(name: str, amount: Decimal) -> dict:
    return {name: _to_major_str(amount), f"{name}_minor": _to_minor_int(amount)}


def parse_report_date(value, *, field: str) -> date_cls | None:
    if value in (None, ""):
        return None
    if isinstance(value, date_cls):
        return value
    try:
        return date_cls.fromisoformat(str(value).strip())
    except ValueError as exc:
        raise DocumentValidationError(
            f"Invalid {field} format (YYYY-MM-DD)", field=field
        ) from exc


def _sum(qs, field: str) -> Decimal:
    return _q2(qs.aggregate(total=Sum(field))["total"])


# ============================================================
# PROFIT & LOSS
# ============================================================


def get_profit_and_loss(*, start_date=None, end_date=None) -> dict:
    start = parse_report_date(start_date, field="start_date")
    end = parse_report_date(end_date, field="end_date")

    if start and end and start > end:
        raise DocumentValidationError(
            "start_date cannot be after end_date", field="start_date"
        )

    receipts = SALES_FLOW.payment_model.objects.filter(
        payment_type=PaymentDocument.TYPE_RECEIVE
    )
    outgoing = PURCHASE_FLOW.payment_model.objects.filter(
        payment_type=PaymentDocument.TYPE_SEND
    )

    if start:
        receipts = receipts.filter(payment_date__gte=start)
        outgoing = outgoing.filter(payment_date__gte=start)
    if end:
        receipts = receipts.filter(payment_date__lte=end)
        outgoing = outgoing.filter(payment_date__lte=end)

    income = _sum(receipts, "amount")
    expense = _sum(outgoing, "amount")
    profit_loss = _q2(income - expense)

    return {
        "start_date": start.isoformat() if start else None,
        "end_date": end.isoformat() if end else None,
        **_money_pair("income", income),
        **_money_pair("expense", expense),
        **_money_pair("profit_loss", profit_loss),
    }


# ============================================================
# BALANCE SHEET
# ============================================================


def generate_balance_sheet() -> dict:
    cash_and_bank = _sum(
        Account.objects.filter(account_type=Account.ASSETS), "current_balance"
    )

    sales_bills = SALES_FLOW.bill_model.objects.exclude(
        status=BillDocument.STATUS_CANCELLED
    )
    vendor_bills = PURCHASE_FLOW.bill_model.objects.exclude(
        status=BillDocument.STATUS_CANCELLED
    )

    receivable = _sum(sales_bills.filter(status=BillDocument.STATUS_POSTED), "total_amount")
    payable = _sum(vendor_bills.filter(status=BillDocument.STATUS_POSTED), "total_amount")
    retained_earnings = _q2(
        _sum(sales_bills, "total_amount") - _sum(vendor_bills, "total_amount")
    )

    total_assets = _q2(cash_and_bank + receivable)
    total_liabilities = payable
    total_equity = retained_earnings
    balance = _q2(total_assets - (total_liabilities + total_equity))

    return {
        "assets": {
            **_money_pair("cash_and_bank", cash_and_bank),
            **_money_pair("accounts_receivable", receivable),
            **_money_pair("total", total_assets),
        },
        "liabilities": {
            **_money_pair("accounts_payable", payable),
            **_money_pair("total", total_liabilities),
        },
        "equity": {
            **_money_pair("retained_earnings", retained_earnings),
            **_money_pair("total", total_equity),
        },
        **_money_pair("balance", balance),
        "is_balanced": balance == Decimal("0.00"),
    }


# ============================================================
# DASHBOARD SUMMARY
# ============================================================


def get_dashboard_summary(*, today: date_cls | None = None) -> dict:
    """
    Sales / purchase / payment totals for the last 1, 7 and 30 days
    (inclusive of today, by document date).
    """
    today = today or timezone.localdate()

    sales_bills = SALES_FLOW.bill_model.objects.exclude(status=BillDocument.STATUS_CANCELLED)
    vendor_bills = PURCHASE_FLOW.bill_model.objects.exclude(status=BillDocument.STATUS_CANCELLED)
    receipts = SALES_FLOW.payment_model.objects.all()
    outgoing = PURCHASE_FLOW.payment_model.objects.all()

    windows = {}
    for label, days in DASHBOARD_WINDOWS:
        since = today - timedelta(days=days - 1)

        sales = _sum(sales_bills.filter(bill_date__gte=since, bill_date__lte=today), "total_amount")
        purchases = _sum(
            vendor_bills.filter(bill_date__gte=since, bill_date__lte=today), "total_amount"
        )
        received = _sum(
            receipts.filter(payment_date__gte=since, payment_date__lte=today), "amount"
        )
        paid = _sum(outgoing.filter(payment_date__gte=since, payment_date__lte=today), "amount")

        windows[label] = {
            "since": since.isoformat(),
            **_money_pair("sales", sales),
            **_money_pair("purchases", purchases),
            **_money_pair("payments_received", received),
            **_money_pair("payments_made", paid),
            **_money_pair("payments", _q2(received + paid)),
        }

    return {"as_of": today.isoformat(), **windows}
