# contacts/models.py

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q


class Contact(models.Model):
    """
    Business partner master (customer, vendor, or both).

    Ledger bucket:
    - vendor   -> Creditor (we owe them)
    - customer -> Debtor   (they owe us)
    - both     -> depends on the side of the document being posted
    """

    ROLE_CUSTOMER = "customer"
    ROLE_VENDOR = "vendor"
    ROLE_BOTH = "both"

    ROLES = [
        (ROLE_CUSTOMER, "Customer"),
        (ROLE_VENDOR, "Vendor"),
        (ROLE_BOTH, "Both"),
    ]

    SIDE_PURCHASE = "purchase"
    SIDE_SALES = "sales"

    BUCKET_CREDITOR = "Creditor"
    BUCKET_DEBTOR = "Debtor"

    name = models.CharField(max_length=200, unique=True)
    email = models.EmailField(unique=True)
    phone = models.CharField(max_length=50, blank=True, default="")
    city = models.CharField(max_length=100, blank=True, default="")
    state = models.CharField(max_length=100, blank=True, default="")
    pincode = models.CharField(max_length=20, blank=True, default="")

    role = models.CharField(max_length=20, choices=ROLES)

    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]
        indexes = [
            models.Index(fields=["role"]),
            models.Index(fields=["is_active"]),
        ]
        constraints = [
            models.CheckConstraint(
                condition=~Q(name=""),
                name="chk_contact_name_not_blank",
            ),
        ]

    def __str__(self):
        return self.name

    def acts_on(self, side: str) -> bool:
        if self.role == self.ROLE_BOTH:
            return True
        if side == self.SIDE_PURCHASE:
            return self.role == self.ROLE_VENDOR
        return self.role == self.ROLE_CUSTOMER

    def bucket_for(self, side: str) -> str:
        if self.role == self.ROLE_VENDOR:
            return self.BUCKET_CREDITOR
        if self.role == self.ROLE_CUSTOMER:
            return self.BUCKET_DEBTOR
        return self.BUCKET_CREDITOR if side == self.SIDE_PURCHASE else self.BUCKET_DEBTOR

    def clean(self):
        if not (self.name or "").strip():
            raise ValidationError({"name": "name is required"})

    def save(self, *args, **kwargs):
        self.name = (self.name or "").strip()
        self.email = (self.email or "").strip().lower()
        self.full_clean()
        return super().save(*args, **kwargs)
