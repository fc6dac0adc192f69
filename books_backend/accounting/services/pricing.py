# accounting/services/pricing.py

"""
LINE-ITEM CALCULATOR

Pure functions (no DB access) that turn (quantity, unit price, tax rate)
into the three amounts every document line stores:

    untaxed   = quantity * unit_price
    tax       = untaxed * tax_rate / 100
    total     = untaxed + tax

Guarantees:
- Decimal arithmetic only, each amount quantized to 2 places (ROUND_HALF_UP)
- line total == untaxed + tax exactly (after quantization)
- quantity is a whole number > 0, unit_price > 0, 0 <= tax_rate <= 100
- validation failures name the offending line index and field
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable

from accounting.services.exceptions import DocumentValidationError

TWOPLACES = Decimal("0.01")
HUNDRED = Decimal("100")


def _money(v) -> Decimal:
    return Decimal(str(v or "0.00")).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def _to_decimal(value, *, field: str, line_index: int | None) -> Decimal:
    if value is None or isinstance(value, bool):
        raise DocumentValidationError(
            f"{field} is required", field=field, line_index=line_index
        )
    try:
        d = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise DocumentValidationError(
            f"{field} must be a number", field=field, line_index=line_index
        ) from exc
    if not d.is_finite():
        raise DocumentValidationError(
            f"{field} must be a finite number", field=field, line_index=line_index
        )
    return d


@dataclass(frozen=True)
class LineAmounts:
    quantity: Decimal
    unit_price: Decimal
    tax_rate: Decimal
    untaxed_amount: Decimal
    tax_amount: Decimal
    total_amount: Decimal


def compute_line(*, quantity, unit_price, tax_rate, line_index: int | None = None) -> LineAmounts:
    q = _to_decimal(quantity, field="quantity", line_index=line_index)
    p = _to_decimal(unit_price, field="unit_price", line_index=line_index)
    t = _to_decimal(tax_rate, field="tax_rate", line_index=line_index)

    if q <= 0:
        raise DocumentValidationError(
            "quantity must be greater than zero", field="quantity", line_index=line_index
        )
    if q != q.to_integral_value():
        raise DocumentValidationError(
            "quantity must be a whole number", field="quantity", line_index=line_index
        )
    if p <= 0:
        raise DocumentValidationError(
            "unit_price must be greater than zero", field="unit_price", line_index=line_index
        )
    if t < 0 or t > HUNDRED:
        raise DocumentValidationError(
            "tax_rate must be between 0 and 100", field="tax_rate", line_index=line_index
        )

    try:
        untaxed = _money(q * p)
        tax = _money(untaxed * t / HUNDRED)
    except InvalidOperation as exc:
        raise DocumentValidationError(
            "quantity * unit_price is too large", field="quantity", line_index=line_index
        ) from exc

    return LineAmounts(
        quantity=q,
        unit_price=p,
        tax_rate=t,
        untaxed_amount=untaxed,
        tax_amount=tax,
        total_amount=untaxed + tax,
    )


def document_total(lines: Iterable[LineAmounts]) -> Decimal:
    total = Decimal("0.00")
    for line in lines:
        total += line.total_amount
    return _money(total)
