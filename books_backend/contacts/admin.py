# contacts/admin.py

from django.contrib import admin

from contacts.models import Contact


@admin.register(Contact)
class ContactAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "role", "city", "is_active", "created_at")
    list_filter = ("role", "is_active")
    search_fields = ("name", "email", "phone")
    ordering = ("name",)
    readonly_fields = ("created_at",)
