# products/models/product.py

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q

from .tax import Tax


class Product(models.Model):
    """
    Catalog product (goods or service).

    - name is the natural key used by bill lines
    - sales_price / purchase_price are catalog defaults; document lines carry
      their own unit price snapshot
    """

    TYPE_GOODS = "goods"
    TYPE_SERVICE = "service"

    PRODUCT_TYPES = [
        (TYPE_GOODS, "Goods"),
        (TYPE_SERVICE, "Service"),
    ]

    name = models.CharField(max_length=255, unique=True)
    product_type = models.CharField(
        max_length=20, choices=PRODUCT_TYPES, default=TYPE_GOODS
    )

    sales_price = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )
    purchase_price = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )

    hsn_code = models.CharField(max_length=32, blank=True, default="")

    sales_tax = models.ForeignKey(
        Tax,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="sales_products",
    )
    purchase_tax = models.ForeignKey(
        Tax,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="purchase_products",
    )

    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        indexes = [
            models.Index(fields=["product_type"]),
            models.Index(fields=["is_active"]),
        ]
        constraints = [
            models.CheckConstraint(
                condition=Q(sales_price__gte=Decimal("0.00")),
                name="chk_product_sales_price_nonnegative",
            ),
            models.CheckConstraint(
                condition=Q(purchase_price__gte=Decimal("0.00")),
                name="chk_product_purchase_price_nonnegative",
            ),
        ]

    def __str__(self):
        return self.name

    def clean(self):
        self.name = (self.name or "").strip()
        if not self.name:
            raise ValidationError({"name": "name is required"})

    def save(self, *args, **kwargs):
        self.full_clean()
        return super().save(*args, **kwargs)
