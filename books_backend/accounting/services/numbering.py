# accounting/services/numbering.py

"""
DOCUMENT NUMBERING SERVICE

Issues human-readable, strictly increasing document numbers per series:

    purchase_order   P00001
    sales_order      SO00001
    vendor_bill      Bill/2025/0001
    sales_bill       Inv/2025/0001
    vendor_payment   Pay/25/0001
    sales_payment    Rec/25/0001

Algorithm:
- prefix = series prefix rendered for the document date (year / 2-digit year)
- highest committed number under that prefix (longest first, then
  lexicographic -> numerically highest for a fixed prefix)
- parse the numeric suffix, +1, zero-pad to the series width
- nothing stored yet -> seed (suffix 1)

Guarantees:
- next_number() must run in the same transaction as the insert
  (create_numbered() does both inside one savepoint)
- the number column is unique; a concurrent writer that takes the same
  number loses with DuplicateNumberError (retryable)
- a stored number that does not match the series format is a
  data-integrity failure (NumberingIntegrityError); we never guess
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date

from django.apps import apps
from django.core.exceptions import ValidationError
from django.db import DatabaseError, IntegrityError, transaction
from django.db.models.functions import Length
from django.utils import timezone

from accounting.services.exceptions import (
    DuplicateNumberError,
    NumberingIntegrityError,
    PersistenceError,
    from_django_validation,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NumberSeries:
    key: str
    model_label: str
    prefix: str
    width: int

    def prefix_for(self, on_date: date) -> str:
        return self.prefix.format(year=f"{on_date.year:04d}", yy=f"{on_date.year % 100:02d}")

    def format(self, *, on_date: date, sequence: int) -> str:
        return f"{self.prefix_for(on_date)}{sequence:0{self.width}d}"

    def parse(self, number: str, *, on_date: date) -> int:
        pattern = re.escape(self.prefix_for(on_date)) + r"(\d{%d,})" % self.width
        match = re.fullmatch(pattern, number or "")
        if not match:
            raise NumberingIntegrityError(
                f"Stored {self.key} number '{number}' does not match the series format"
            )
        return int(match.group(1))

    def get_model(self):
        return apps.get_model(self.model_label)


PURCHASE_ORDER = NumberSeries("purchase_order", "purchases.PurchaseOrder", "P", 5)
SALES_ORDER = NumberSeries("sales_order", "sales.SalesOrder", "SO", 5)
VENDOR_BILL = NumberSeries("vendor_bill", "purchases.VendorBill", "Bill/{year}/", 4)
SALES_BILL = NumberSeries("sales_bill", "sales.SalesBill", "Inv/{year}/", 4)
VENDOR_PAYMENT = NumberSeries("vendor_payment", "purchases.VendorPayment", "Pay/{yy}/", 4)
SALES_PAYMENT = NumberSeries("sales_payment", "sales.SalesPayment", "Rec/{yy}/", 4)


def next_number(series: NumberSeries, *, on_date: date | None = None) -> str:
    on_date = on_date or timezone.localdate()
    model = series.get_model()
    prefix = series.prefix_for(on_date)

    last = (
        model.objects.filter(number__startswith=prefix)
        .annotate(number_length=Length("number"))
        .order_by("-number_length", "-number")
        .values_list("number", flat=True)
        .first()
    )

    if last is None:
        return series.format(on_date=on_date, sequence=1)

    return series.format(on_date=on_date, sequence=series.parse(last, on_date=on_date) + 1)


def create_numbered(series: NumberSeries, *, on_date: date | None = None, **fields):
    """
    Take the next number in `series` and insert a row of the series model.

    Must be called inside transaction.atomic(); the insert runs in a
    savepoint so a lost race can be told apart from other failures.
    """
    on_date = on_date or timezone.localdate()
    model = series.get_model()
    number = next_number(series, on_date=on_date)

    try:
        with transaction.atomic():
            return model.objects.create(number=number, **fields)
    except ValidationError as exc:
        number_errors = getattr(exc, "error_dict", {}).get("number", [])
        if any(e.code == "unique" for e in number_errors):
            raise _duplicate(series, number) from exc
        raise from_django_validation(exc) from exc
    except IntegrityError as exc:
        if model.objects.filter(number=number).exists():
            raise _duplicate(series, number) from exc
        logger.exception(
            "Numbered insert failed",
            extra={"series": series.key, "number": number},
        )
        raise PersistenceError(f"Failed to store {series.key} {number}") from exc
    except DatabaseError as exc:
        logger.exception(
            "Numbered insert failed",
            extra={"series": series.key, "number": number},
        )
        raise PersistenceError(f"Failed to store {series.key} {number}") from exc


def _duplicate(series: NumberSeries, number: str) -> DuplicateNumberError:
    logger.warning(
        "Document number collision",
        extra={"series": series.key, "number": number},
    )
    return DuplicateNumberError(
        f"{series.key} number {number} was taken by a concurrent request; retry"
    )
