from decimal import Decimal

from django.core.management import call_command
from django.core.management.base import BaseCommand
from django.db import transaction

from contacts.models import Contact
from products.models import Product, Tax


class Command(BaseCommand):
    help = "Seed demo catalog: products and partner contacts (runs seed_books_chart first)"

    @transaction.atomic
    def handle(self, *args, **options):
        call_command("seed_books_chart", stdout=self.stdout)

        self.stdout.write(self.style.WARNING("Seeding products and contacts..."))

        # -------------------------------
        # CONTACTS
        # -------------------------------
        contacts_data = [
            ("Azure Interior", "purchases@azure-interior.test", Contact.ROLE_VENDOR, "Mumbai"),
            ("Wood Corner", "accounts@woodcorner.test", Contact.ROLE_VENDOR, "Pune"),
            ("Deco Addict", "billing@decoaddict.test", Contact.ROLE_CUSTOMER, "Ahmedabad"),
            ("Gemini Furniture", "hello@gemini-furniture.test", Contact.ROLE_BOTH, "Surat"),
        ]

        for name, email, role, city in contacts_data:
            Contact.objects.get_or_create(
                name=name,
                defaults={"email": email, "role": role, "city": city},
            )

        # -------------------------------
        # PRODUCTS
        # -------------------------------
        gst_5 = Tax.objects.filter(name="GST 5%", scope=Tax.SCOPE_BOTH).first()
        gst_18 = Tax.objects.filter(name="GST 18%", scope=Tax.SCOPE_BOTH).first()

        products_data = [
            ("Office Chair", Product.TYPE_GOODS, "9401", 3500, 2500, gst_18),
            ("Office Desk", Product.TYPE_GOODS, "9403", 17000, 15000, gst_5),
            ("Dining Table", Product.TYPE_GOODS, "9403", 22000, 18000, gst_18),
            ("Assembly Service", Product.TYPE_SERVICE, "9987", 1500, 900, gst_18),
        ]

        created_count = 0
        for name, product_type, hsn, sales_price, purchase_price, tax in products_data:
            _, created = Product.objects.get_or_create(
                name=name,
                defaults={
                    "product_type": product_type,
                    "hsn_code": hsn,
                    "sales_price": Decimal(sales_price),
                    "purchase_price": Decimal(purchase_price),
                    "sales_tax": tax,
                    "purchase_tax": tax,
                },
            )
            created_count += int(created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Catalog seeded ({created_count} new products, {Contact.objects.count()} contacts)."
            )
        )
