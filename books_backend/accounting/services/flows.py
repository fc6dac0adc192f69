# accounting/services/flows.py

"""
DOCUMENT FLOWS

A flow binds the generic document services (conversion, settlement) to one
side of the business:

- PURCHASE_FLOW: PurchaseOrder -> VendorBill -> VendorPayment (send)
- SALES_FLOW:    SalesOrder    -> SalesBill  -> SalesPayment  (receive)

Models are referenced by app label and loaded lazily so the accounting app
never imports purchases/sales at module import time.
"""

from __future__ import annotations

from dataclasses import dataclass

from django.apps import apps
from django.conf import settings

from accounting.models import PaymentDocument
from accounting.services import numbering
from contacts.models import Contact


@dataclass(frozen=True)
class DocumentFlow:
    side: str
    order_label: str
    order_line_label: str
    bill_label: str
    bill_line_label: str
    payment_label: str
    bill_order_field: str
    order_series: numbering.NumberSeries
    bill_series: numbering.NumberSeries
    payment_series: numbering.NumberSeries
    payment_type: str
    default_account_setting: str

    @property
    def order_model(self):
        return apps.get_model(self.order_label)

    @property
    def order_line_model(self):
        return apps.get_model(self.order_line_label)

    @property
    def bill_model(self):
        return apps.get_model(self.bill_label)

    @property
    def bill_line_model(self):
        return apps.get_model(self.bill_line_label)

    @property
    def payment_model(self):
        return apps.get_model(self.payment_label)

    def default_account_name(self) -> str:
        books = getattr(settings, "BOOKS", {}) or {}
        return (books.get(self.default_account_setting) or "").strip()


PURCHASE_FLOW = DocumentFlow(
    side=Contact.SIDE_PURCHASE,
    order_label="purchases.PurchaseOrder",
    order_line_label="purchases.PurchaseOrderLine",
    bill_label="purchases.VendorBill",
    bill_line_label="purchases.VendorBillLine",
    payment_label="purchases.VendorPayment",
    bill_order_field="purchase_order",
    order_series=numbering.PURCHASE_ORDER,
    bill_series=numbering.VENDOR_BILL,
    payment_series=numbering.VENDOR_PAYMENT,
    payment_type=PaymentDocument.TYPE_SEND,
    default_account_setting="DEFAULT_PURCHASE_ACCOUNT",
)

SALES_FLOW = DocumentFlow(
    side=Contact.SIDE_SALES,
    order_label="sales.SalesOrder",
    order_line_label="sales.SalesOrderLine",
    bill_label="sales.SalesBill",
    bill_line_label="sales.SalesBillLine",
    payment_label="sales.SalesPayment",
    bill_order_field="sales_order",
    order_series=numbering.SALES_ORDER,
    bill_series=numbering.SALES_BILL,
    payment_series=numbering.SALES_PAYMENT,
    payment_type=PaymentDocument.TYPE_RECEIVE,
    default_account_setting="DEFAULT_SALES_ACCOUNT",
)

FLOWS = (PURCHASE_FLOW, SALES_FLOW)
