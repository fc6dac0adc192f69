# accounting/services/settlement.py

"""
======================================================
PATH: accounting/services/settlement.py
======================================================
PAYMENT SETTLEMENT ENGINE

Settle one bill with exactly one payment, for either side of the business.

Canonical flow (atomic):
1) Lock bill                          -> NotFoundError
2) Bill must not be paid yet          -> AlreadySettledError
3) Bill must be payable (posted)      -> InvalidTransitionError
4) Settlement account exists + Assets -> InvalidAccountError
5) Create payment (amount == bill total, next payment number)
6) Mark bill PAID

Guarantees:
- payment amount always equals the bill total (no partial payments)
- a second settle on the same bill fails with AlreadySettledError; the
  payment -> bill one-to-one column is the storage-level backstop
- payment and bill status commit together or not at all
"""

from __future__ import annotations

import logging
from datetime import date

from django.db import transaction
from django.utils import timezone

from accounting.models import Account, BillDocument
from accounting.services import numbering
from accounting.services.exceptions import (
    AlreadySettledError,
    InvalidAccountError,
    NotFoundError,
)
from accounting.services.flows import DocumentFlow
from accounting.services.lifecycle import validate_bill_transition

logger = logging.getLogger(__name__)


def _load_bill_for_update(flow: DocumentFlow, bill_id):
    try:
        bill = (
            flow.bill_model.objects.select_for_update()
            .select_related("contact")
            .filter(pk=bill_id)
            .first()
        )
    except (TypeError, ValueError) as exc:
        raise NotFoundError(flow.bill_series.key, bill_id) from exc

    if bill is None:
        raise NotFoundError(flow.bill_series.key, bill_id)
    return bill


def _resolve_settlement_account(account_id) -> Account:
    try:
        account = Account.objects.filter(pk=account_id).first()
    except (TypeError, ValueError):
        account = None

    if account is None:
        logger.error(
            "Settlement account not found",
            extra={"account_id": str(account_id)},
        )
        raise InvalidAccountError(f"Settlement account '{account_id}' not found")

    if not account.is_settlement_account:
        logger.error(
            "Settlement account is not an Assets account",
            extra={"account_id": account.pk, "account_type": account.account_type},
        )
        raise InvalidAccountError(
            f"Account '{account.name}' is {account.account_type}; only Assets accounts can settle a bill"
        )

    return account


@transaction.atomic
def settle_bill(
    flow: DocumentFlow,
    *,
    bill_id,
    account_id,
    payment_date: date | None = None,
    note: str = "",
):
    """
    SETTLE BILL (atomic)
    """
    logger.info(
        "Initiating bill settlement",
        extra={"side": flow.side, "bill_id": str(bill_id), "account_id": str(account_id)},
    )

    bill = _load_bill_for_update(flow, bill_id)

    if (
        bill.status == BillDocument.STATUS_PAID
        or flow.payment_model.objects.filter(bill=bill).exists()
    ):
        raise AlreadySettledError(f"Bill {bill.number} is already paid")

    validate_bill_transition(bill=bill, target_status=BillDocument.STATUS_PAID)

    account = _resolve_settlement_account(account_id)
    payment_date = payment_date or timezone.localdate()

    payment = numbering.create_numbered(
        flow.payment_series,
        on_date=payment_date,
        payment_type=flow.payment_type,
        amount=bill.total_amount,
        payment_date=payment_date,
        contact=bill.contact,
        journal=account,
        bill=bill,
        note=note or "",
    )

    bill.status = BillDocument.STATUS_PAID
    bill.save(update_fields=["status", "updated_at"])

    logger.info(
        "Bill settled",
        extra={
            "bill_number": bill.number,
            "payment_number": payment.number,
            "amount": str(payment.amount),
            "payment_type": payment.payment_type,
        },
    )
    return payment
