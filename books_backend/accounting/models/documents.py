# accounting/models/documents.py

"""
COMMERCIAL DOCUMENT BASES (ABSTRACT)

Shared shape of the purchase-side and sales-side documents:

- OrderDocument / OrderLineDocument   (PurchaseOrder, SalesOrder)
- BillDocument / BillLineDocument     (VendorBill, SalesBill)
- PaymentDocument                     (VendorPayment, SalesPayment)

Concrete models live in the purchases and sales apps and add the parent
links (order -> lines, bill -> source order, payment -> bill).

Rules:
- Keep this file model-only (no services imported here).
- Every document number is unique within its table.
- Header totals are written by services from the line-item calculator.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q
from django.utils import timezone

ZERO = Decimal("0.00")


class OrderDocument(models.Model):
    STATUS_DRAFT = "draft"
    STATUS_CONFIRMED = "confirmed"
    STATUS_CANCELLED = "cancelled"

    STATUSES = [
        (STATUS_DRAFT, "Draft"),
        (STATUS_CONFIRMED, "Confirmed"),
        (STATUS_CANCELLED, "Cancelled"),
    ]

    number = models.CharField(max_length=32, unique=True)

    contact = models.ForeignKey(
        "contacts.Contact",
        on_delete=models.PROTECT,
        related_name="%(class)ss",
    )

    order_date = models.DateField(default=timezone.localdate)
    reference = models.CharField(max_length=120, blank=True, default="")

    total_amount = models.DecimalField(max_digits=14, decimal_places=2, default=ZERO)
    status = models.CharField(max_length=20, choices=STATUSES, default=STATUS_DRAFT)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ["-order_date", "-number"]
        constraints = [
            models.CheckConstraint(
                condition=Q(total_amount__gte=ZERO),
                name="%(app_label)s_%(class)s_total_nonnegative",
            ),
        ]

    def __str__(self):
        return self.number

    def clean(self):
        if not (self.number or "").strip():
            raise ValidationError({"number": "number is required"})

        if self.total_amount is not None and self.total_amount < ZERO:
            raise ValidationError({"total_amount": "total_amount cannot be negative"})

    def save(self, *args, **kwargs):
        self.number = (self.number or "").strip()
        self.reference = (self.reference or "").strip()
        self.full_clean()
        return super().save(*args, **kwargs)


class DocumentLine(models.Model):
    """
    Priced line shared by orders and bills.

    Amounts are computed by accounting.services.pricing and stored as-is:
    total_amount == untaxed_amount + tax_amount.
    """

    product = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="%(class)ss",
    )
    tax = models.ForeignKey(
        "products.Tax",
        on_delete=models.PROTECT,
        related_name="%(class)ss",
    )

    quantity = models.PositiveIntegerField()
    unit_price = models.DecimalField(max_digits=14, decimal_places=2)
    tax_rate = models.DecimalField(max_digits=5, decimal_places=2, default=ZERO)

    untaxed_amount = models.DecimalField(max_digits=14, decimal_places=2, default=ZERO)
    tax_amount = models.DecimalField(max_digits=14, decimal_places=2, default=ZERO)
    total_amount = models.DecimalField(max_digits=14, decimal_places=2, default=ZERO)

    class Meta:
        abstract = True
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=Q(quantity__gt=0),
                name="%(app_label)s_%(class)s_qty_positive",
            ),
            models.CheckConstraint(
                condition=Q(unit_price__gt=ZERO),
                name="%(app_label)s_%(class)s_price_positive",
            ),
            models.CheckConstraint(
                condition=Q(tax_rate__gte=ZERO) & Q(tax_rate__lte=Decimal("100")),
                name="%(app_label)s_%(class)s_tax_rate_range",
            ),
        ]

    def clean(self):
        if (
            self.untaxed_amount is not None
            and self.tax_amount is not None
            and self.total_amount is not None
            and self.untaxed_amount + self.tax_amount != self.total_amount
        ):
            raise ValidationError(
                {"total_amount": "total_amount must equal untaxed_amount + tax_amount"}
            )

    def save(self, *args, **kwargs):
        self.full_clean()
        return super().save(*args, **kwargs)


class BillDocument(models.Model):
    STATUS_DRAFT = "draft"
    STATUS_POSTED = "posted"
    STATUS_PAID = "paid"
    STATUS_CANCELLED = "cancelled"

    STATUSES = [
        (STATUS_DRAFT, "Draft"),
        (STATUS_POSTED, "Posted"),
        (STATUS_PAID, "Paid"),
        (STATUS_CANCELLED, "Cancelled"),
    ]

    number = models.CharField(max_length=32, unique=True)

    contact = models.ForeignKey(
        "contacts.Contact",
        on_delete=models.PROTECT,
        related_name="%(class)ss",
    )

    bill_date = models.DateField(default=timezone.localdate)
    due_date = models.DateField(null=True, blank=True)
    bill_reference = models.CharField(max_length=120, blank=True, default="")

    total_amount = models.DecimalField(max_digits=14, decimal_places=2, default=ZERO)
    status = models.CharField(max_length=20, choices=STATUSES, default=STATUS_POSTED)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ["-bill_date", "-number"]
        constraints = [
            models.CheckConstraint(
                condition=Q(total_amount__gte=ZERO),
                name="%(app_label)s_%(class)s_total_nonnegative",
            ),
        ]

    def __str__(self):
        return self.number

    @property
    def is_paid(self) -> bool:
        return self.status == self.STATUS_PAID

    def clean(self):
        if not (self.number or "").strip():
            raise ValidationError({"number": "number is required"})

        if self.total_amount is not None and self.total_amount < ZERO:
            raise ValidationError({"total_amount": "total_amount cannot be negative"})

        if self.due_date and self.bill_date and self.due_date < self.bill_date:
            raise ValidationError({"due_date": "due_date cannot be before bill_date"})

    def save(self, *args, **kwargs):
        self.number = (self.number or "").strip()
        self.bill_reference = (self.bill_reference or "").strip()
        self.full_clean()
        return super().save(*args, **kwargs)


class BillLineDocument(DocumentLine):
    account = models.ForeignKey(
        "accounting.Account",
        on_delete=models.PROTECT,
        related_name="%(class)ss",
    )

    class Meta(DocumentLine.Meta):
        abstract = True


class PaymentDocument(models.Model):
    TYPE_SEND = "send"
    TYPE_RECEIVE = "receive"

    PAYMENT_TYPES = [
        (TYPE_SEND, "Send"),
        (TYPE_RECEIVE, "Receive"),
    ]

    number = models.CharField(max_length=32, unique=True)
    payment_type = models.CharField(max_length=10, choices=PAYMENT_TYPES)

    amount = models.DecimalField(max_digits=14, decimal_places=2)
    payment_date = models.DateField(default=timezone.localdate)

    contact = models.ForeignKey(
        "contacts.Contact",
        on_delete=models.PROTECT,
        related_name="%(class)ss",
    )
    journal = models.ForeignKey(
        "accounting.Account",
        on_delete=models.PROTECT,
        related_name="%(class)ss",
        help_text="Settlement (cash/bank) account",
    )

    note = models.CharField(max_length=255, blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
        ordering = ["-payment_date", "-number"]
        constraints = [
            models.CheckConstraint(
                condition=Q(amount__gt=ZERO),
                name="%(app_label)s_%(class)s_amount_positive",
            ),
        ]

    def __str__(self):
        return self.number

    def clean(self):
        if not (self.number or "").strip():
            raise ValidationError({"number": "number is required"})

        if self.amount is not None and self.amount <= ZERO:
            raise ValidationError({"amount": "amount must be greater than zero"})

    def save(self, *args, **kwargs):
        self.number = (self.number or "").strip()
        self.note = (self.note or "").strip()
        self.full_clean()
        return super().save(*args, **kwargs)
