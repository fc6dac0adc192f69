# sales/models/order.py

from django.db import models

from accounting.models import DocumentLine, OrderDocument


class SalesOrder(OrderDocument):
    """
    Sales order header (numbered SO00001, SO00002, ...).
    """

    class Meta(OrderDocument.Meta):
        indexes = [
            models.Index(fields=["contact", "order_date"]),
            models.Index(fields=["status"]),
        ]


class SalesOrderLine(DocumentLine):
    order = models.ForeignKey(
        SalesOrder,
        on_delete=models.CASCADE,
        related_name="lines",
    )

    class Meta(DocumentLine.Meta):
        pass
