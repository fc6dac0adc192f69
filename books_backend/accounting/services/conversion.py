# accounting/services/conversion.py

"""
======================================================
PATH: accounting/services/conversion.py
======================================================
DOCUMENT CONVERSION PIPELINE

Creates orders and turns orders into bills, for either side of the business
(see accounting.services.flows).

Canonical flow (one atomic unit of work):
1) Load + lock the source order (if any); reject cancelled orders
2) Resolve the partner and every line's product / account / tax through a
   ReferenceResolver (NotFoundError on the first miss)
3) Line-item calculator over all lines (DocumentValidationError names the line)
4) Next document number + insert header and lines
5) Implicitly confirm a draft source order

Any failure rolls the whole unit back: no header without lines, no number
consumed.

Rules:
- a bill created from an order carries the order's partner; an explicit
  partner that differs is rejected
- with no input lines, the order's lines are copied verbatim (quantity,
  unit price, tax rate, stored amounts) onto the side's default account
- bills are created POSTED, orders DRAFT
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction
from django.utils import timezone

from accounting.models import Account, BillDocument, OrderDocument
from accounting.services import numbering, pricing
from accounting.services.exceptions import (
    DocumentValidationError,
    NotFoundError,
    PersistenceError,
    from_django_validation,
)
from accounting.services.flows import DocumentFlow
from accounting.services.lifecycle import (
    validate_order_conversion,
    validate_order_transition,
)
from accounting.services.resolvers import (
    IdResolver,
    NaturalKeyResolver,
    ReferenceResolver,
)
from contacts.models import Contact
from products.models import Product, Tax

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineInput:
    """
    One requested document line, as keys the resolver understands.

    tax_rate is set when the caller addresses the tax by its rate; the
    numbers are then validated before any lookup happens.
    """

    product: object
    tax: object
    quantity: object
    unit_price: object
    account: object = None
    tax_rate: object = None


@dataclass(frozen=True)
class ResolvedLine:
    product: Product
    tax: Tax
    account: Account | None
    amounts: pricing.LineAmounts


# ============================================================
# HELPERS
# ============================================================


def _check_partner_side(flow: DocumentFlow, contact: Contact) -> None:
    if not contact.acts_on(flow.side):
        raise DocumentValidationError(
            f"Contact '{contact.name}' is a {contact.role} and cannot be used on {flow.side} documents",
            field="partner",
        )


def _resolve_line(
    flow: DocumentFlow,
    *,
    index: int,
    line: LineInput,
    resolver: ReferenceResolver,
    with_account: bool,
) -> ResolvedLine:
    amounts = None
    if line.tax_rate is not None:
        amounts = pricing.compute_line(
            quantity=line.quantity,
            unit_price=line.unit_price,
            tax_rate=line.tax_rate,
            line_index=index,
        )

    product = resolver.product(line.product)

    account = None
    if with_account:
        if line.account in (None, ""):
            raise DocumentValidationError(
                "account is required", field="account", line_index=index
            )
        account = resolver.account(line.account)

    tax = resolver.tax(line.tax, side=flow.side)
    if tax.computation_method != Tax.METHOD_PERCENTAGE:
        raise DocumentValidationError(
            f"Tax '{tax.name}' is not a percentage tax", field="tax", line_index=index
        )

    if amounts is None:
        amounts = pricing.compute_line(
            quantity=line.quantity,
            unit_price=line.unit_price,
            tax_rate=tax.value,
            line_index=index,
        )

    return ResolvedLine(product=product, tax=tax, account=account, amounts=amounts)


def _resolve_lines(
    flow: DocumentFlow,
    lines,
    *,
    resolver: ReferenceResolver,
    with_account: bool,
) -> list[ResolvedLine]:
    return [
        _resolve_line(
            flow, index=index, line=line, resolver=resolver, with_account=with_account
        )
        for index, line in enumerate(lines)
    ]


def _copy_order_lines(flow: DocumentFlow, order: OrderDocument) -> list[ResolvedLine]:
    account_name = flow.default_account_name()
    if not account_name:
        raise DocumentValidationError(
            "lines are required (no default account configured for copied order lines)",
            field="lines",
        )
    account = NaturalKeyResolver().account(account_name)

    copied = []
    for ol in order.lines.select_related("product", "tax").order_by("id"):
        copied.append(
            ResolvedLine(
                product=ol.product,
                tax=ol.tax,
                account=account,
                amounts=pricing.LineAmounts(
                    quantity=ol.quantity,
                    unit_price=ol.unit_price,
                    tax_rate=ol.tax_rate,
                    untaxed_amount=ol.untaxed_amount,
                    tax_amount=ol.tax_amount,
                    total_amount=ol.total_amount,
                ),
            )
        )
    return copied


def _create_lines(model, *, parent_field: str, parent, resolved: list[ResolvedLine]) -> None:
    for index, rl in enumerate(resolved):
        fields = {
            parent_field: parent,
            "product": rl.product,
            "tax": rl.tax,
            "quantity": int(rl.amounts.quantity),
            "unit_price": rl.amounts.unit_price,
            "tax_rate": rl.amounts.tax_rate,
            "untaxed_amount": rl.amounts.untaxed_amount,
            "tax_amount": rl.amounts.tax_amount,
            "total_amount": rl.amounts.total_amount,
        }
        if rl.account is not None:
            fields["account"] = rl.account

        try:
            model.objects.create(**fields)
        except ValidationError as exc:
            raise from_django_validation(exc, line_index=index) from exc
        except DatabaseError as exc:
            logger.exception(
                "Document line insert failed",
                extra={"document": parent.number, "line": index},
            )
            raise PersistenceError(f"Failed to store lines of {parent.number}") from exc


def load_order_for_update(flow: DocumentFlow, order_id):
    try:
        order = (
            flow.order_model.objects.select_for_update()
            .select_related("contact")
            .filter(pk=order_id)
            .first()
        )
    except (TypeError, ValueError) as exc:
        raise NotFoundError(flow.order_series.key, order_id) from exc

    if order is None:
        raise NotFoundError(flow.order_series.key, order_id)
    return order


# ============================================================
# ORDERS
# ============================================================


@transaction.atomic
def create_order(
    flow: DocumentFlow,
    *,
    contact,
    lines,
    order_date: date | None = None,
    reference: str = "",
    resolver: ReferenceResolver | None = None,
):
    """
    CREATE ORDER (atomic)

    `contact` and every LineInput key go through `resolver` (default: by id).
    """
    resolver = resolver or IdResolver()
    order_date = order_date or timezone.localdate()

    partner = resolver.contact(contact)
    _check_partner_side(flow, partner)

    lines = list(lines or [])
    if not lines:
        raise DocumentValidationError("at least one line is required", field="lines")

    resolved = _resolve_lines(flow, lines, resolver=resolver, with_account=False)
    total = pricing.document_total(rl.amounts for rl in resolved)

    order = numbering.create_numbered(
        flow.order_series,
        on_date=order_date,
        contact=partner,
        order_date=order_date,
        reference=reference or "",
        total_amount=total,
        status=OrderDocument.STATUS_DRAFT,
    )
    _create_lines(flow.order_line_model, parent_field="order", parent=order, resolved=resolved)

    logger.info(
        "Order created",
        extra={
            "order_number": order.number,
            "side": flow.side,
            "contact_id": partner.pk,
            "total_amount": str(total),
            "lines": len(resolved),
        },
    )
    return order


# ============================================================
# ORDER -> BILL
# ============================================================


@transaction.atomic
def convert_to_bill(
    flow: DocumentFlow,
    *,
    source_order_id=None,
    partner=None,
    bill_date: date | None = None,
    due_date: date | None = None,
    bill_reference: str | None = None,
    lines=None,
    resolver: ReferenceResolver | None = None,
):
    """
    CONVERT ORDER -> BILL (atomic)

    `partner` and every LineInput key go through `resolver` (default: by
    natural key). Returns the POSTED bill.
    """
    resolver = resolver or NaturalKeyResolver()
    bill_date = bill_date or timezone.localdate()

    # ------------------------------
    # 1) Source order
    # ------------------------------
    order = None
    if source_order_id not in (None, ""):
        order = load_order_for_update(flow, source_order_id)
        validate_order_conversion(order=order)

    # ------------------------------
    # 2) Partner
    # ------------------------------
    explicit = resolver.contact(partner) if partner not in (None, "") else None

    if order is not None and explicit is not None and explicit.pk != order.contact_id:
        raise DocumentValidationError(
            f"Partner '{explicit.name}' does not match order {order.number} partner '{order.contact.name}'",
            field="partner",
        )

    contact = explicit or (order.contact if order is not None else None)
    if contact is None:
        raise DocumentValidationError(
            "partner is required when no source order is given", field="partner"
        )
    _check_partner_side(flow, contact)

    # ------------------------------
    # 3) Lines + amounts
    # ------------------------------
    lines = list(lines or [])
    if lines:
        resolved = _resolve_lines(flow, lines, resolver=resolver, with_account=True)
    elif order is not None:
        resolved = _copy_order_lines(flow, order)
    else:
        resolved = []

    if not resolved:
        raise DocumentValidationError("at least one line is required", field="lines")

    total = pricing.document_total(rl.amounts for rl in resolved)

    if not (bill_reference or "").strip() and order is not None:
        bill_reference = order.reference

    # ------------------------------
    # 4) Number + persist
    # ------------------------------
    bill = numbering.create_numbered(
        flow.bill_series,
        on_date=bill_date,
        contact=contact,
        bill_date=bill_date,
        due_date=due_date,
        bill_reference=bill_reference or "",
        total_amount=total,
        status=BillDocument.STATUS_POSTED,
        **{flow.bill_order_field: order},
    )
    _create_lines(flow.bill_line_model, parent_field="bill", parent=bill, resolved=resolved)

    # ------------------------------
    # 5) Implicit confirmation
    # ------------------------------
    if order is not None and order.status == OrderDocument.STATUS_DRAFT:
        validate_order_transition(order=order, target_status=OrderDocument.STATUS_CONFIRMED)
        order.status = OrderDocument.STATUS_CONFIRMED
        order.save(update_fields=["status", "updated_at"])

    logger.info(
        "Bill created",
        extra={
            "bill_number": bill.number,
            "side": flow.side,
            "contact_id": contact.pk,
            "source_order": order.number if order is not None else None,
            "total_amount": str(total),
            "lines": len(resolved),
        },
    )
    return bill
