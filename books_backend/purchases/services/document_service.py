# purchases/services/document_service.py

"""
PURCHASE DOCUMENT SERVICE

Purchase orders (P00001) and vendor bills (Bill/<year>/0001).

- orders take contact / product / tax by id
- bills take vendor / product / account by name and tax by rate
"""

from __future__ import annotations

from accounting.services.conversion import LineInput, convert_to_bill, create_order
from accounting.services.flows import PURCHASE_FLOW
from accounting.services.order_status import cancel_order, confirm_order


def create_purchase_order(*, contact_id, lines, order_date=None, reference: str = ""):
    return create_order(
        PURCHASE_FLOW,
        contact=contact_id,
        order_date=order_date,
        reference=reference,
        lines=[
            LineInput(
                product=line["product_id"],
                tax=line["tax_id"],
                quantity=line.get("quantity"),
                unit_price=line.get("unit_price"),
            )
            for line in lines
        ],
    )


def confirm_purchase_order(*, order_id):
    return confirm_order(PURCHASE_FLOW, order_id=order_id)


def cancel_purchase_order(*, order_id):
    return cancel_order(PURCHASE_FLOW, order_id=order_id)


def create_vendor_bill(
    *,
    purchase_order_id=None,
    vendor_name=None,
    bill_date=None,
    due_date=None,
    bill_reference=None,
    lines=None,
):
    return convert_to_bill(
        PURCHASE_FLOW,
        source_order_id=purchase_order_id,
        partner=vendor_name,
        bill_date=bill_date,
        due_date=due_date,
        bill_reference=bill_reference,
        lines=[
            LineInput(
                product=line.get("product_name"),
                account=line.get("account_name"),
                tax=line.get("tax_rate"),
                tax_rate=line.get("tax_rate"),
                quantity=line.get("quantity"),
                unit_price=line.get("unit_price"),
            )
            for line in (lines or [])
        ],
    )
