# accounting/models/account.py

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q


class Account(models.Model):
    """
    A single account of the business (cash box, bank, expense head...).

    Guarantees:
    - Account names are unique (name is the natural key used by bill lines)
    - Name is normalized (trimmed)
    - Only ASSETS accounts may settle a bill (enforced by the settlement engine)

    current_balance is maintained as master data; settlement does not move it.
    """

    ASSETS = "Assets"
    LIABILITIES = "Liabilities"
    INCOME = "Income"
    EXPENSE = "Expense"

    ACCOUNT_TYPES = [
        (ASSETS, "Assets"),
        (LIABILITIES, "Liabilities"),
        (INCOME, "Income"),
        (EXPENSE, "Expense"),
    ]

    name = models.CharField(max_length=150, unique=True)

    account_type = models.CharField(
        max_length=20,
        choices=ACCOUNT_TYPES,
    )

    current_balance = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )

    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        verbose_name = "Account"
        verbose_name_plural = "Accounts"
        indexes = [
            models.Index(fields=["account_type"]),
            models.Index(fields=["is_active"]),
        ]
        constraints = [
            models.CheckConstraint(
                condition=~Q(name=""),
                name="chk_account_name_not_blank",
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.account_type})"

    @property
    def is_settlement_account(self) -> bool:
        return self.account_type == self.ASSETS

    def clean(self):
        self.name = (self.name or "").strip()

        if not self.name:
            raise ValidationError({"name": "Account name is required"})

    def save(self, *args, **kwargs):
        self.full_clean()
        return super().save(*args, **kwargs)
