# purchases/services/payment_service.py

"""
VENDOR PAYMENT SERVICE

Settles one vendor bill with one outgoing (send) payment numbered
Pay/<yy>/0001. See accounting.services.settlement for the rules.
"""

from __future__ import annotations

from accounting.services.flows import PURCHASE_FLOW
from accounting.services.settlement import settle_bill


def pay_vendor_bill(*, bill_id, account_id, payment_date=None, note: str = ""):
    return settle_bill(
        PURCHASE_FLOW,
        bill_id=bill_id,
        account_id=account_id,
        payment_date=payment_date,
        note=note,
    )
