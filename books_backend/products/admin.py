# products/admin.py

from django.contrib import admin

from products.models import Product, Tax


@admin.register(Tax)
class TaxAdmin(admin.ModelAdmin):
    list_display = ("name", "computation_method", "scope", "value", "is_active")
    list_filter = ("computation_method", "scope", "is_active")
    search_fields = ("name",)
    ordering = ("value", "name")


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "product_type",
        "sales_price",
        "purchase_price",
        "hsn_code",
        "is_active",
    )
    list_filter = ("product_type", "is_active")
    search_fields = ("name", "hsn_code")
    list_select_related = ("sales_tax", "purchase_tax")
    readonly_fields = ("created_at", "updated_at")
