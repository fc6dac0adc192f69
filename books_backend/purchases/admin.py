# purchases/admin.py

from django.contrib import admin

from accounting.admin import ReadOnlyDocumentAdmin, ReadOnlyLineInline
from purchases.models import (
    PurchaseOrder,
    PurchaseOrderLine,
    VendorBill,
    VendorBillLine,
    VendorPayment,
)


class PurchaseOrderLineInline(ReadOnlyLineInline):
    model = PurchaseOrderLine


class VendorBillLineInline(ReadOnlyLineInline):
    model = VendorBillLine
    fields = ReadOnlyLineInline.fields + ("account",)
    readonly_fields = fields


@admin.register(PurchaseOrder)
class PurchaseOrderAdmin(ReadOnlyDocumentAdmin):
    list_display = ("number", "contact", "order_date", "total_amount", "status")
    list_filter = ("status",)
    inlines = [PurchaseOrderLineInline]


@admin.register(VendorBill)
class VendorBillAdmin(ReadOnlyDocumentAdmin):
    list_display = ("number", "contact", "bill_date", "due_date", "total_amount", "status")
    list_filter = ("status",)
    inlines = [VendorBillLineInline]


@admin.register(VendorPayment)
class VendorPaymentAdmin(ReadOnlyDocumentAdmin):
    list_display = ("number", "contact", "bill", "payment_date", "amount", "journal")
    list_select_related = ("contact", "bill", "journal")
