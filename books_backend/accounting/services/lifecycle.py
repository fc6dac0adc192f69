"""
DOCUMENT LIFECYCLE DOMAIN RULES

This module defines the ONLY allowed lifecycle transitions
for orders and bills (purchase and sales side alike).

    Order: draft -> confirmed -> cancelled
           draft -> cancelled
    Bill:  draft -> posted -> paid
           draft | posted -> cancelled

DESIGN PRINCIPLES:
- No database writes
- No side effects
- Single source of truth
"""

from accounting.models import BillDocument, OrderDocument
from accounting.services.exceptions import InvalidTransitionError

# ============================================================
# STATE DEFINITIONS
# ============================================================

ORDER_TERMINAL_STATES = {
    OrderDocument.STATUS_CANCELLED,
}

ORDER_TRANSITIONS = {
    OrderDocument.STATUS_DRAFT: {
        OrderDocument.STATUS_CONFIRMED,
        OrderDocument.STATUS_CANCELLED,
    },
    OrderDocument.STATUS_CONFIRMED: {
        OrderDocument.STATUS_CANCELLED,
    },
}

BILL_TERMINAL_STATES = {
    BillDocument.STATUS_PAID,
    BillDocument.STATUS_CANCELLED,
}

BILL_TRANSITIONS = {
    BillDocument.STATUS_DRAFT: {
        BillDocument.STATUS_POSTED,
        BillDocument.STATUS_CANCELLED,
    },
    BillDocument.STATUS_POSTED: {
        BillDocument.STATUS_PAID,
        BillDocument.STATUS_CANCELLED,
    },
}


# ============================================================
# DOMAIN RULES
# ============================================================


def can_transition_order(*, from_status: str, to_status: str) -> bool:
    if from_status in ORDER_TERMINAL_STATES:
        return False

    return to_status in ORDER_TRANSITIONS.get(from_status, set())


def can_transition_bill(*, from_status: str, to_status: str) -> bool:
    if from_status in BILL_TERMINAL_STATES:
        return False

    return to_status in BILL_TRANSITIONS.get(from_status, set())


def can_convert_order(order: OrderDocument) -> bool:
    return order.status in (OrderDocument.STATUS_DRAFT, OrderDocument.STATUS_CONFIRMED)


def validate_order_transition(*, order: OrderDocument, target_status: str):
    if not can_transition_order(from_status=order.status, to_status=target_status):
        raise InvalidTransitionError(
            f"Order {order.number} cannot transition from "
            f"'{order.status}' to '{target_status}'"
        )


def validate_order_conversion(*, order: OrderDocument):
    if not can_convert_order(order):
        raise InvalidTransitionError(
            f"Order {order.number} is '{order.status}' and cannot be converted into a bill"
        )


def validate_bill_transition(*, bill: BillDocument, target_status: str):
    if not can_transition_bill(from_status=bill.status, to_status=target_status):
        raise InvalidTransitionError(
            f"Bill {bill.number} cannot transition from "
            f"'{bill.status}' to '{target_status}'"
        )
