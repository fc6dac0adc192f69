# sales/services/document_service.py

"""
SALES DOCUMENT SERVICE

Sales orders (SO00001) and sales bills / customer invoices (Inv/<year>/0001).

- orders take contact / product / tax by id
- bills take customer / product / account by name and tax by rate
"""

from __future__ import annotations

from accounting.services.conversion import LineInput, convert_to_bill, create_order
from accounting.services.flows import SALES_FLOW
from accounting.services.order_status import cancel_order, confirm_order


def create_sales_order(*, contact_id, lines, order_date=None, reference: str = ""):
    return create_order(
        SALES_FLOW,
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


def confirm_sales_order(*, order_id):
    return confirm_order(SALES_FLOW, order_id=order_id)


def cancel_sales_order(*, order_id):
    return cancel_order(SALES_FLOW, order_id=order_id)


def create_sales_bill(
    *,
    sales_order_id=None,
    customer_name=None,
    bill_date=None,
    due_date=None,
    bill_reference=None,
    line_items=None,
):
    return convert_to_bill(
        SALES_FLOW,
        source_order_id=sales_order_id,
        partner=customer_name,
        bill_date=bill_date,
        due_date=due_date,
        bill_reference=bill_reference,
        lines=[
            LineInput(
                product=item.get("product_name"),
                account=item.get("account_name"),
                tax=item.get("tax_rate"),
                tax_rate=item.get("tax_rate"),
                quantity=item.get("quantity"),
                unit_price=item.get("unit_price"),
            )
            for item in (line_items or [])
        ],
    )
