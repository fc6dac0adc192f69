# sales/admin.py

from django.contrib import admin

from accounting.admin import ReadOnlyDocumentAdmin, ReadOnlyLineInline
from sales.models import (
    SalesBill,
    SalesBillLine,
    SalesOrder,
    SalesOrderLine,
    SalesPayment,
)


class SalesOrderLineInline(ReadOnlyLineInline):
    model = SalesOrderLine


class SalesBillLineInline(ReadOnlyLineInline):
    model = SalesBillLine
    fields = ReadOnlyLineInline.fields + ("account",)
    readonly_fields = fields


@admin.register(SalesOrder)
class SalesOrderAdmin(ReadOnlyDocumentAdmin):
    list_display = ("number", "contact", "order_date", "total_amount", "status")
    list_filter = ("status",)
    inlines = [SalesOrderLineInline]


@admin.register(SalesBill)
class SalesBillAdmin(ReadOnlyDocumentAdmin):
    list_display = ("number", "contact", "bill_date", "due_date", "total_amount", "status")
    list_filter = ("status",)
    inlines = [SalesBillLineInline]


@admin.register(SalesPayment)
class SalesPaymentAdmin(ReadOnlyDocumentAdmin):
    list_display = ("number", "contact", "bill", "payment_date", "amount", "journal")
    list_select_related = ("contact", "bill", "journal")
