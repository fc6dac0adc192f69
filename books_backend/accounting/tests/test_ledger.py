# accounting/tests/test_ledger.py

from datetime import date
from decimal import Decimal

from django.test import TestCase
from rest_framework.test import APIClient

from accounting.services.ledger_service import build_ledger, partner_balances
from accounting.tests.factories import BooksSetupMixin, make_user
from purchases.models import VendorBill
from purchases.services.document_service import create_vendor_bill
from purchases.services.payment_service import pay_vendor_bill
from sales.services.document_service import create_sales_bill


class LedgerServiceTests(BooksSetupMixin, TestCase):
    """
    Partner ledger.

    GUARANTEES:
    - bills add, payments subtract
    - entries sorted by (partner, date, reference), running balance per partner
    - closing balance == sum(bills) - sum(payments)
    - cancelled bills never appear
    """

    def _vendor_bill(self, bill_date, **line):
        return create_vendor_bill(vendor_name="Azure Interior", bill_date=bill_date, lines=[self.bill_line(**line)])

    def _sales_bill(self, bill_date):
        return create_sales_bill(
            customer_name="Deco Addict",
            bill_date=bill_date,
            line_items=[self.bill_line(account="Sales Income", tax_rate="0", unit_price="5000")],
        )

    def test_example_bill_and_payment(self):
        bill = self._vendor_bill(date(2025, 1, 10))
        pay_vendor_bill(bill_id=bill.id, account_id=self.bank.id, payment_date=date(2025, 1, 15))

        entries = build_ledger()

        self.assertEqual(len(entries), 2)
        first, second = entries
        self.assertEqual(first.reference_number, "Bill/2025/0001")
        self.assertEqual(first.account_bucket, "Creditor")
        self.assertEqual(first.signed_amount, Decimal("17850.00"))
        self.assertEqual(first.running_balance, Decimal("17850.00"))
        self.assertEqual(first.due_date, None)

        self.assertEqual(second.reference_number, "Pay/25/0001")
        self.assertEqual(second.signed_amount, Decimal("-17850.00"))
        self.assertEqual(second.running_balance, Decimal("0.00"))

    def test_running_balance_resets_per_partner(self):
        self._vendor_bill(date(2025, 1, 10))
        self._sales_bill(date(2025, 1, 5))
        self._sales_bill(date(2025, 1, 6))

        entries = build_ledger()

        by_partner = {}
        for entry in entries:
            by_partner.setdefault(entry.partner_id, []).append(entry)

        vendor_entries = by_partner[self.vendor.id]
        customer_entries = by_partner[self.customer.id]

        self.assertEqual([e.running_balance for e in vendor_entries], [Decimal("17850.00")])
        self.assertEqual(
            [e.running_balance for e in customer_entries],
            [Decimal("5000.00"), Decimal("10000.00")],
        )
        self.assertTrue(all(e.account_bucket == "Debtor" for e in customer_entries))

        # partner ids ascending, then date
        self.assertEqual(entries, sorted(entries, key=lambda e: e.sort_key()))

    def test_same_day_entries_sort_by_reference(self):
        b1 = self._vendor_bill(date(2025, 1, 10))
        b2 = self._vendor_bill(date(2025, 1, 10))

        refs = [e.reference_number for e in build_ledger()]

        self.assertEqual(refs, [b1.number, b2.number])

    def test_closing_balance_is_bills_minus_payments(self):
        b1 = self._vendor_bill(date(2025, 1, 10))
        self._vendor_bill(date(2025, 1, 11), quantity=2)
        pay_vendor_bill(bill_id=b1.id, account_id=self.bank.id, payment_date=date(2025, 1, 20))

        closing = partner_balances(build_ledger())

        self.assertEqual(len(closing), 1)
        self.assertEqual(closing[0]["partner_id"], self.vendor.id)
        # (17850 + 35700) - 17850
        self.assertEqual(closing[0]["closing_balance"], "35700.00")

    def test_cancelled_bills_are_excluded(self):
        bill = self._vendor_bill(date(2025, 1, 10))
        VendorBill.objects.filter(pk=bill.pk).update(status=VendorBill.STATUS_CANCELLED)

        self.assertEqual(build_ledger(), [])

    def test_filter_by_contact(self):
        self._vendor_bill(date(2025, 1, 10))
        self._sales_bill(date(2025, 1, 5))

        entries = build_ledger(contact_id=self.customer.id)

        self.assertEqual({e.partner_id for e in entries}, {self.customer.id})

    def test_entry_as_dict(self):
        self._vendor_bill(date(2025, 1, 10))

        row = build_ledger()[0].as_dict()

        self.assertEqual(row["partner_name"], "Azure Interior")
        self.assertEqual(row["document_type"], "vendor_bill")
        self.assertEqual(row["date"], "2025-01-10")
        self.assertEqual(row["signed_amount"], "17850.00")
        self.assertEqual(row["running_balance"], "17850.00")


class LedgerApiTests(BooksSetupMixin, TestCase):
    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(user=make_user())

    def test_ledger_endpoint(self):
        bill = create_vendor_bill(vendor_name="Azure Interior", bill_date=date(2025, 1, 10), lines=[self.bill_line()])
        pay_vendor_bill(bill_id=bill.id, account_id=self.bank.id, payment_date=date(2025, 1, 15))

        res = self.client.get("/api/ledger/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["count"], 2)
        self.assertEqual(
            [(r["signed_amount"], r["running_balance"]) for r in res.data["results"]],
            [("17850.00", "17850.00"), ("-17850.00", "0.00")],
        )
        self.assertEqual(res.data["closing_balances"][0]["closing_balance"], "0.00")

    def test_contact_id_must_be_integer(self):
        res = self.client.get("/api/ledger/", {"contact_id": "abc"})

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data["code"], "validation_error")

    def test_empty_ledger(self):
        res = self.client.get("/api/ledger/", {"contact_id": self.vendor.id})

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["count"], 0)
        self.assertEqual(res.data["closing_balances"], [])
