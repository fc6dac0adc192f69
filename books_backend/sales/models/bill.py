# sales/models/bill.py

from django.db import models

from accounting.models import BillDocument, BillLineDocument

from .order import SalesOrder


class SalesBill(BillDocument):
    """
    Customer invoice (numbered Inv/<year>/0001).

    Created POSTED; a SalesPayment (receipt) flips it to PAID.
    """

    sales_order = models.ForeignKey(
        SalesOrder,
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


class SalesBillLine(BillLineDocument):
    bill = models.ForeignKey(
        SalesBill,
        on_delete=models.CASCADE,
        related_name="lines",
    )

    class Meta(BillLineDocument.Meta):
        pass
