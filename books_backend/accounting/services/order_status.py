# accounting/services/order_status.py

"""
ORDER STATUS SERVICE

Explicit, guarded order transitions (confirm / cancel).

Rules:
- transitions follow accounting.services.lifecycle
- an order with a live (non-cancelled) bill cannot be cancelled
"""

from __future__ import annotations

import logging

from django.db import transaction

from accounting.models import BillDocument, OrderDocument
from accounting.services.conversion import load_order_for_update
from accounting.services.exceptions import InvalidTransitionError
from accounting.services.flows import DocumentFlow
from accounting.services.lifecycle import validate_order_transition

logger = logging.getLogger(__name__)


def _transition(flow: DocumentFlow, *, order_id, target_status: str):
    order = load_order_for_update(flow, order_id)
    validate_order_transition(order=order, target_status=target_status)

    previous = order.status
    order.status = target_status
    order.save(update_fields=["status", "updated_at"])

    logger.info(
        "Order status changed",
        extra={
            "order_number": order.number,
            "from_status": previous,
            "to_status": target_status,
        },
    )
    return order


@transaction.atomic
def confirm_order(flow: DocumentFlow, *, order_id):
    return _transition(flow, order_id=order_id, target_status=OrderDocument.STATUS_CONFIRMED)


@transaction.atomic
def cancel_order(flow: DocumentFlow, *, order_id):
    order = load_order_for_update(flow, order_id)

    if order.bills.exclude(status=BillDocument.STATUS_CANCELLED).exists():
        raise InvalidTransitionError(
            f"Order {order.number} has bills and cannot be cancelled"
        )

    return _transition(flow, order_id=order.pk, target_status=OrderDocument.STATUS_CANCELLED)
