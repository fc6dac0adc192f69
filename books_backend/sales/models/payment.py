# sales/models/payment.py

from django.db import models

from accounting.models import PaymentDocument

from .bill import SalesBill


class SalesPayment(PaymentDocument):
    """
    Incoming receipt (numbered Rec/<yy>/0001) settling one sales bill.
    """

    bill = models.OneToOneField(
        SalesBill,
        on_delete=models.PROTECT,
        related_name="payment",
    )

    class Meta(PaymentDocument.Meta):
        indexes = [
            models.Index(fields=["contact", "payment_date"]),
            models.Index(fields=["payment_type"]),
        ]
