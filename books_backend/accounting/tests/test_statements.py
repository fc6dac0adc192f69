# accounting/tests/test_statements.py

from datetime import date
from decimal import Decimal

from django.test import TestCase
from rest_framework.test import APIClient

from accounting.models import Account
from accounting.services.exceptions import DocumentValidationError
from accounting.services.statements import (
    generate_balance_sheet,
    get_dashboard_summary,
    get_profit_and_loss,
)
from accounting.tests.factories import BooksSetupMixin, make_user
from purchases.models import VendorBill
from purchases.services.document_service import create_vendor_bill
from purchases.services.payment_service import pay_vendor_bill
from sales.services.document_service import create_sales_bill
from sales.services.payment_service import receive_sales_payment


class StatementsMixin(BooksSetupMixin):
    def vendor_bill(self, bill_date, **line):
        return create_vendor_bill(
            vendor_name="Azure Interior", bill_date=bill_date, lines=[self.bill_line(**line)]
        )

    def sales_bill(self, bill_date):
        # 2 x 10000 + 18% = 23600.00
        return create_sales_bill(
            customer_name="Deco Addict",
            bill_date=bill_date,
            line_items=[
                self.bill_line(account="Sales Income", tax_rate="18", quantity=2, unit_price="10000")
            ],
        )


class ProfitAndLossTests(StatementsMixin, TestCase):
    def test_cash_basis(self):
        vb = self.vendor_bill(date(2025, 1, 10))
        sb = self.sales_bill(date(2025, 1, 12))
        pay_vendor_bill(bill_id=vb.id, account_id=self.bank.id, payment_date=date(2025, 1, 15))
        receive_sales_payment(bill_id=sb.id, account_id=self.bank.id, payment_date=date(2025, 1, 20))

        # unpaid bills do not count
        self.vendor_bill(date(2025, 1, 21))

        pl = get_profit_and_loss()

        self.assertEqual(pl["income"], "23600.00")
        self.assertEqual(pl["expense"], "17850.00")
        self.assertEqual(pl["profit_loss"], "5750.00")
        self.assertEqual(pl["income_minor"], 2360000)
        self.assertEqual(pl["expense_minor"], 1785000)
        self.assertEqual(pl["profit_loss_minor"], 575000)
        self.assertIsNone(pl["start_date"])

    def test_loss_is_negative(self):
        vb = self.vendor_bill(date(2025, 1, 10))
        pay_vendor_bill(bill_id=vb.id, account_id=self.bank.id, payment_date=date(2025, 1, 15))

        pl = get_profit_and_loss()

        self.assertEqual(pl["profit_loss"], "-17850.00")
        self.assertEqual(pl["profit_loss_minor"], -1785000)

    def test_date_window(self):
        vb = self.vendor_bill(date(2025, 1, 10))
        pay_vendor_bill(bill_id=vb.id, account_id=self.bank.id, payment_date=date(2025, 1, 15))

        inside = get_profit_and_loss(start_date="2025-01-01", end_date="2025-01-31")
        outside = get_profit_and_loss(start_date="2025-02-01")

        self.assertEqual(inside["expense"], "17850.00")
        self.assertEqual(inside["start_date"], "2025-01-01")
        self.assertEqual(outside["expense"], "0.00")

    def test_invalid_window(self):
        with self.assertRaises(DocumentValidationError):
            get_profit_and_loss(start_date="2025-02-01", end_date="2025-01-01")

        with self.assertRaises(DocumentValidationError) as ctx:
            get_profit_and_loss(start_date="01/02/2025")
        self.assertEqual(ctx.exception.field, "start_date")

    def test_empty_books(self):
        pl = get_profit_and_loss()

        self.assertEqual((pl["income"], pl["expense"], pl["profit_loss"]), ("0.00", "0.00", "0.00"))


class BalanceSheetTests(StatementsMixin, TestCase):
    def test_unpaid_bills_with_no_cash_balance(self):
        self.vendor_bill(date(2025, 1, 10))
        self.sales_bill(date(2025, 1, 12))

        bs = generate_balance_sheet()

        self.assertEqual(bs["assets"]["cash_and_bank"], "0.00")
        self.assertEqual(bs["assets"]["accounts_receivable"], "23600.00")
        self.assertEqual(bs["assets"]["total"], "23600.00")
        self.assertEqual(bs["liabilities"]["accounts_payable"], "17850.00")
        self.assertEqual(bs["equity"]["retained_earnings"], "5750.00")
        self.assertEqual(bs["balance"], "0.00")
        self.assertTrue(bs["is_balanced"])

    def test_paid_bills_leave_receivable_and_payable(self):
        vb = self.vendor_bill(date(2025, 1, 10))
        sb = self.sales_bill(date(2025, 1, 12))
        pay_vendor_bill(bill_id=vb.id, account_id=self.bank.id)
        receive_sales_payment(bill_id=sb.id, account_id=self.bank.id)

        bs = generate_balance_sheet()

        self.assertEqual(bs["assets"]["accounts_receivable"], "0.00")
        self.assertEqual(bs["liabilities"]["accounts_payable"], "0.00")
        self.assertEqual(bs["equity"]["retained_earnings"], "5750.00")

    def test_cash_and_bank_sums_assets_accounts(self):
        Account.objects.filter(pk=self.bank.pk).update(current_balance=Decimal("50000.00"))
        Account.objects.filter(pk=self.cash.pk).update(current_balance=Decimal("1250.50"))
        Account.objects.filter(pk=self.expense.pk).update(current_balance=Decimal("999.00"))

        bs = generate_balance_sheet()

        self.assertEqual(bs["assets"]["cash_and_bank"], "51250.50")
        self.assertEqual(bs["assets"]["cash_and_bank_minor"], 5125050)
        # no double entry: the difference is reported, not hidden
        self.assertEqual(bs["balance"], "51250.50")
        self.assertFalse(bs["is_balanced"])

    def test_cancelled_bills_do_not_count(self):
        vb = self.vendor_bill(date(2025, 1, 10))
        VendorBill.objects.filter(pk=vb.pk).update(status=VendorBill.STATUS_CANCELLED)

        bs = generate_balance_sheet()

        self.assertEqual(bs["liabilities"]["accounts_payable"], "0.00")
        self.assertEqual(bs["equity"]["retained_earnings"], "0.00")


class DashboardSummaryTests(StatementsMixin, TestCase):
    def test_windows(self):
        today = date(2025, 1, 31)
        self.sales_bill(today)
        self.vendor_bill(date(2025, 1, 20))
        old = self.vendor_bill(date(2024, 12, 1))
        pay_vendor_bill(bill_id=old.id, account_id=self.bank.id, payment_date=date(2025, 1, 30))

        summary = get_dashboard_summary(today=today)

        self.assertEqual(summary["as_of"], "2025-01-31")
        self.assertEqual(summary["last_1_day"]["sales"], "23600.00")
        self.assertEqual(summary["last_1_day"]["purchases"], "0.00")
        self.assertEqual(summary["last_1_day"]["payments_made"], "0.00")
        self.assertEqual(summary["last_7_days"]["payments_made"], "17850.00")
        self.assertEqual(summary["last_7_days"]["purchases"], "0.00")
        self.assertEqual(summary["last_30_days"]["purchases"], "17850.00")
        self.assertEqual(summary["last_30_days"]["payments"], "17850.00")
        self.assertEqual(summary["last_30_days"]["since"], "2025-01-02")


class ReportApiTests(StatementsMixin, TestCase):
    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(user=make_user())

    def test_profit_loss_endpoint(self):
        res = self.client.get("/api/profit-loss/", {"start_date": "2025-01-01", "end_date": "2025-12-31"})

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["profit_loss"], "0.00")

    def test_profit_loss_bad_date(self):
        res = self.client.get("/api/profit-loss/", {"start_date": "yesterday"})

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data["code"], "validation_error")
        self.assertEqual(res.data["field"], "start_date")

    def test_balance_sheet_endpoint(self):
        self.sales_bill(date(2025, 1, 12))

        res = self.client.get("/api/balance-sheet/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["assets"]["accounts_receivable"], "23600.00")
        self.assertIn("is_balanced", res.data)

    def test_dashboard_endpoint(self):
        res = self.client.get("/api/dashboard-summary/")

        self.assertEqual(res.status_code, 200)
        self.assertIn("last_7_days", res.data)

    def test_reports_require_authentication(self):
        anon = APIClient()
        for url in ("/api/profit-loss/", "/api/balance-sheet/", "/api/dashboard-summary/", "/api/ledger/"):
            self.assertEqual(anon.get(url).status_code, 401, url)
