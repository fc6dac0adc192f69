# accounting/services/ledger_service.py

"""
PARTNER LEDGER SERVICE

Read-only merge of the four document streams into one time-ordered,
running-balance report per partner:

    vendor bills    +total   (Creditor for vendors)
    sales bills     +total   (Debtor for customers)
    vendor payments -amount
    sales payments  -amount

Key rules:
- cancelled bills are void and never appear
- sort key: (partner id, document date, reference number)
- running balance resets at each new partner
- final running balance per partner == sum(bill totals) - sum(payment amounts)

Amounts go out as 2dp strings (never floats).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from accounting.models import BillDocument
from accounting.services.flows import FLOWS

TWOPLACES = Decimal("0.01")


def _q2(amount: Decimal) -> Decimal:
    return (amount or Decimal("0.00")).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


@dataclass
class LedgerEntry:
    partner_id: int
    partner_name: str
    account_bucket: str
    document_type: str
    reference_number: str
    date: date
    due_date: date | None
    signed_amount: Decimal
    running_balance: Decimal = Decimal("0.00")

    def sort_key(self):
        return (self.partner_id, self.date, self.reference_number)

    def as_dict(self) -> dict:
        return {
            "partner_id": self.partner_id,
            "partner_name": self.partner_name,
            "account_bucket": self.account_bucket,
            "document_type": self.document_type,
            "reference_number": self.reference_number,
            "date": self.date.isoformat(),
            "due_date": self.due_date.isoformat() if self.due_date else None,
            "signed_amount": str(_q2(self.signed_amount)),
            "running_balance": str(_q2(self.running_balance)),
        }


def _bill_entries(flow, *, contact_id=None) -> list[LedgerEntry]:
    qs = (
        flow.bill_model.objects.select_related("contact")
        .exclude(status=BillDocument.STATUS_CANCELLED)
    )
    if contact_id is not None:
        qs = qs.filter(contact_id=contact_id)

    return [
        LedgerEntry(
            partner_id=bill.contact_id,
            partner_name=bill.contact.name,
            account_bucket=bill.contact.bucket_for(flow.side),
            document_type=flow.bill_series.key,
            reference_number=bill.number,
            date=bill.bill_date,
            due_date=bill.due_date,
            signed_amount=_q2(bill.total_amount),
        )
        for bill in qs
    ]


def _payment_entries(flow, *, contact_id=None) -> list[LedgerEntry]:
    qs = flow.payment_model.objects.select_related("contact")
    if contact_id is not None:
        qs = qs.filter(contact_id=contact_id)

    return [
        LedgerEntry(
            partner_id=payment.contact_id,
            partner_name=payment.contact.name,
            account_bucket=payment.contact.bucket_for(flow.side),
            document_type=flow.payment_series.key,
            reference_number=payment.number,
            date=payment.payment_date,
            due_date=None,
            signed_amount=-_q2(payment.amount),
        )
        for payment in qs
    ]


def build_ledger(*, contact_id=None) -> list[LedgerEntry]:
    entries: list[LedgerEntry] = []
    for flow in FLOWS:
        entries.extend(_bill_entries(flow, contact_id=contact_id))
        entries.extend(_payment_entries(flow, contact_id=contact_id))

    entries.sort(key=LedgerEntry.sort_key)

    current_partner = None
    balance = Decimal("0.00")
    for entry in entries:
        if entry.partner_id != current_partner:
            current_partner = entry.partner_id
            balance = Decimal("0.00")
        balance += entry.signed_amount
        entry.running_balance = balance

    return entries


def partner_balances(entries: list[LedgerEntry]) -> list[dict]:
    """Closing balance per partner (last running balance seen), in ledger order."""
    closing: dict[int, LedgerEntry] = {}
    for entry in entries:
        closing[entry.partner_id] = entry

    return [
        {
            "partner_id": entry.partner_id,
            "partner_name": entry.partner_name,
            "account_bucket": entry.account_bucket,
            "closing_balance": str(_q2(entry.running_balance)),
        }
        for entry in closing.values()
    ]
