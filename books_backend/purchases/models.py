# purchases/models.py

from django.db import models

from accounting.models import (
    BillDocument,
    BillLineDocument,
    DocumentLine,
    OrderDocument,
    PaymentDocument,
)


class PurchaseOrder(OrderDocument):
    """
    Purchase order header (numbered P00001, P00002, ...).

    Converted into a VendorBill by the conversion pipeline; a draft order is
    confirmed by its first conversion.
    """

    class Meta(OrderDocument.Meta):
        indexes = [
            models.Index(fields=["contact", "order_date"]),
            models.Index(fields=["status"]),
        ]


class PurchaseOrderLine(DocumentLine):
    order = models.ForeignKey(
        PurchaseOrder,
        on_delete=models.CASCADE,
        related_name="lines",
    )

    class Meta(DocumentLine.Meta):
        pass


class VendorBill(BillDocument):
    """
    Vendor bill header (numbered Bill/<year>/0001).

    Created POSTED by the conversion pipeline. Settled exactly once by a
    VendorPayment, which flips it to PAID.
    """

    purchase_order = models.ForeignKey(
        PurchaseOrder,
        on_delete=models.PROTECT,
        related_name="bills",
        null=True,
        blank=True,
    )

    class Meta(BillDocument.Meta):
        indexes = [
            models.Index(fields=["contact", "bill_date"]),
            models.Index(fields=["status"]),
        ]


class VendorBillLine(BillLineDocument):
    bill = models.ForeignKey(
        VendorBill,
        on_delete=models.CASCADE,
        related_name="lines",
    )

    class Meta(BillLineDocument.Meta):
        pass


class VendorPayment(PaymentDocument):
    """
    Outgoing payment (numbered Pay/<yy>/0001) settling one vendor bill.

    The one-to-one link is the storage-level guard for "a bill has at most
    one settling payment".
    """

    bill = models.OneToOneField(
        VendorBill,
        on_delete=models.PROTECT,
        related_name="payment",
    )

    class Meta(PaymentDocument.Meta):
        indexes = [
            models.Index(fields=["contact", "payment_date"]),
            models.Index(fields=["payment_type"]),
        ]
