# accounting/management/commands/seed_books_chart.py

from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import transaction

from accounting.models.account import Account
from products.models import Tax

TAXES = [
    ("GST 0%", "0.00"),
    ("GST 5%", "5.00"),
    ("GST 12%", "12.00"),
    ("GST 18%", "18.00"),
    ("GST 28%", "28.00"),
]


def _default_accounts():
    books = getattr(settings, "BOOKS", {})
    return [
        # ASSETS (settlement journals)
        ("Cash", Account.ASSETS),
        ("Bank", Account.ASSETS),
        # LIABILITIES
        ("Tax Payable", Account.LIABILITIES),
        # INCOME
        (books.get("DEFAULT_SALES_ACCOUNT") or "Sales Income", Account.INCOME),
        # EXPENSE
        (books.get("DEFAULT_PURCHASE_ACCOUNT") or "Purchase Expense", Account.EXPENSE),
    ]


class Command(BaseCommand):
    help = "Seed the default accounts (incl. bill-line defaults) and percentage taxes"

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Seeding chart of accounts...")

        created_count = 0
        updated_count = 0

        for name, account_type in _default_accounts():
            acc, acc_created = Account.objects.get_or_create(
                name=name,
                defaults={"account_type": account_type, "is_active": True},
            )

            if acc_created:
                created_count += 1
                continue

            if acc.account_type != account_type or not acc.is_active:
                acc.account_type = account_type
                acc.is_active = True
                acc.save(update_fields=["account_type", "is_active", "updated_at"])
                updated_count += 1

        tax_count = 0
        for name, value in TAXES:
            _, tax_created = Tax.objects.get_or_create(
                name=name,
                scope=Tax.SCOPE_BOTH,
                defaults={
                    "computation_method": Tax.METHOD_PERCENTAGE,
                    "value": value,
                },
            )
            tax_count += int(tax_created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Chart seeded ({created_count} new accounts, {updated_count} updated, "
                f"{tax_count} new taxes)."
            )
        )
