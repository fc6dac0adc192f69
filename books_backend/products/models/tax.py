# products/models/tax.py

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q


class Tax(models.Model):
    """
    Tax master.

    Document lines resolve a tax by its percentage value within the side
    (purchase / sales) the document belongs to. FIXED taxes are catalog
    data only; the line-item calculator works on percentages.
    """

    METHOD_PERCENTAGE = "percentage"
    METHOD_FIXED = "fixed"

    METHODS = [
        (METHOD_PERCENTAGE, "Percentage"),
        (METHOD_FIXED, "Fixed"),
    ]

    SCOPE_SALES = "sales"
    SCOPE_PURCHASE = "purchase"
    SCOPE_BOTH = "both"

    SCOPES = [
        (SCOPE_SALES, "Sales"),
        (SCOPE_PURCHASE, "Purchase"),
        (SCOPE_BOTH, "Both"),
    ]

    name = models.CharField(max_length=100)
    computation_method = models.CharField(
        max_length=20, choices=METHODS, default=METHOD_PERCENTAGE
    )
    scope = models.CharField(max_length=20, choices=SCOPES, default=SCOPE_BOTH)
    value = models.DecimalField(max_digits=10, decimal_places=2)

    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["value", "name"]
        indexes = [
            models.Index(fields=["computation_method", "value"]),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["name", "scope"],
                name="uniq_tax_name_scope",
            ),
            models.CheckConstraint(
                condition=Q(value__gte=Decimal("0.00")),
                name="chk_tax_value_nonnegative",
            ),
        ]

    def __str__(self):
        if self.computation_method == self.METHOD_PERCENTAGE:
            return f"{self.name} ({self.value}%)"
        return f"{self.name} ({self.value})"

    def clean(self):
        self.name = (self.name or "").strip()
        if not self.name:
            raise ValidationError({"name": "name is required"})

        if (
            self.computation_method == self.METHOD_PERCENTAGE
            and self.value is not None
            and self.value > Decimal("100")
        ):
            raise ValidationError({"value": "percentage tax cannot exceed 100"})

    def save(self, *args, **kwargs):
        self.full_clean()
        return super().save(*args, **kwargs)
