# sales/services/payment_service.py

"""
SALES PAYMENT (RECEIPT) SERVICE

Settles one sales bill with one incoming (receive) payment numbered
Rec/<yy>/0001. See accounting.services.settlement for the rules.
"""

from __future__ import annotations

from accounting.services.flows import SALES_FLOW
from accounting.services.settlement import settle_bill


def receive_sales_payment(*, bill_id, account_id, payment_date=None, note: str = ""):
    return settle_bill(
        SALES_FLOW,
        bill_id=bill_id,
        account_id=account_id,
        payment_date=payment_date,
        note=note,
    )
