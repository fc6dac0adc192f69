# accounting/admin.py
"""
Admin for accounts plus shared read-only admin bases for documents.

Documents (orders, bills, payments) are numbered and priced by the
accounting services; admin only browses them.
"""

from django.contrib import admin

from accounting.models.account import Account


# ============================================================
# ACCOUNT
# ============================================================


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "account_type",
        "current_balance",
        "is_active",
    )
    list_filter = ("account_type", "is_active")
    search_fields = ("name",)
    ordering = ("name",)
    readonly_fields = ("created_at", "updated_at")


# ============================================================
# READ-ONLY DOCUMENT BASES
# ============================================================


class ReadOnlyLineInline(admin.TabularInline):
    extra = 0
    can_delete = False
    fields = (
        "product",
        "tax",
        "quantity",
        "unit_price",
        "tax_rate",
        "untaxed_amount",
        "tax_amount",
        "total_amount",
    )
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


class ReadOnlyDocumentAdmin(admin.ModelAdmin):
    search_fields = ("number", "contact__name")
    list_select_related = ("contact",)

    def get_readonly_fields(self, request, obj=None):
        return [f.name for f in self.model._meta.fields]

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
