# accounting/tests/test_pricing.py

from decimal import Decimal

from django.test import SimpleTestCase

from accounting.services.exceptions import DocumentValidationError
from accounting.services.pricing import LineAmounts, compute_line, document_total


class ComputeLineTests(SimpleTestCase):
    """
    Line-item calculator.

    GUARANTEES:
    - untaxed = q * p, tax = untaxed * t / 100, total = untaxed + tax
    - amounts are 2dp, ROUND_HALF_UP
    - invalid input names the field and the line index
    """

    def test_basic_line(self):
        amounts = compute_line(quantity=1, unit_price="17000", tax_rate="5")

        self.assertEqual(amounts.untaxed_amount, Decimal("17000.00"))
        self.assertEqual(amounts.tax_amount, Decimal("850.00"))
        self.assertEqual(amounts.total_amount, Decimal("17850.00"))

    def test_zero_tax_rate(self):
        amounts = compute_line(quantity=3, unit_price="10.50", tax_rate=0)

        self.assertEqual(amounts.untaxed_amount, Decimal("31.50"))
        self.assertEqual(amounts.tax_amount, Decimal("0.00"))
        self.assertEqual(amounts.total_amount, Decimal("31.50"))

    def test_tax_rounds_half_up(self):
        amounts = compute_line(quantity=3, unit_price="33.33", tax_rate="7.5")

        self.assertEqual(amounts.untaxed_amount, Decimal("99.99"))
        # 99.99 * 7.5% = 7.49925
        self.assertEqual(amounts.tax_amount, Decimal("7.50"))
        self.assertEqual(amounts.total_amount, Decimal("107.49"))

    def test_total_is_untaxed_plus_tax(self):
        for q, p, t in [(1, "0.01", "18"), (7, "123.45", "12"), (250, "3.99", "28"), (2, "99999.99", "100")]:
            amounts = compute_line(quantity=q, unit_price=p, tax_rate=t)
            self.assertEqual(amounts.total_amount, amounts.untaxed_amount + amounts.tax_amount)

            exact = Decimal(q) * Decimal(p) * (1 + Decimal(t) / 100)
            self.assertLessEqual(abs(amounts.total_amount - exact), Decimal("0.01"))

    def test_quantity_must_be_positive(self):
        with self.assertRaises(DocumentValidationError) as ctx:
            compute_line(quantity=0, unit_price="10", tax_rate="5", line_index=2)

        self.assertEqual(ctx.exception.field, "quantity")
        self.assertEqual(ctx.exception.line_index, 2)

    def test_quantity_must_be_whole(self):
        with self.assertRaises(DocumentValidationError) as ctx:
            compute_line(quantity="1.5", unit_price="10", tax_rate="5")

        self.assertEqual(ctx.exception.field, "quantity")

    def test_unit_price_must_be_positive(self):
        with self.assertRaises(DocumentValidationError) as ctx:
            compute_line(quantity=1, unit_price="0", tax_rate="5")

        self.assertEqual(ctx.exception.field, "unit_price")

    def test_tax_rate_range(self):
        for rate in ("-1", "100.01", "101"):
            with self.assertRaises(DocumentValidationError) as ctx:
                compute_line(quantity=1, unit_price="10", tax_rate=rate, line_index=0)
            self.assertEqual(ctx.exception.field, "tax_rate")

        self.assertEqual(
            compute_line(quantity=1, unit_price="10", tax_rate="100").total_amount,
            Decimal("20.00"),
        )

    def test_non_numeric_and_missing_values(self):
        with self.assertRaises(DocumentValidationError):
            compute_line(quantity="abc", unit_price="10", tax_rate="5")
        with self.assertRaises(DocumentValidationError):
            compute_line(quantity=1, unit_price=None, tax_rate="5")
        with self.assertRaises(DocumentValidationError):
            compute_line(quantity=1, unit_price="NaN", tax_rate="5")

    def test_error_payload_names_line(self):
        with self.assertRaises(DocumentValidationError) as ctx:
            compute_line(quantity=-2, unit_price="10", tax_rate="5", line_index=4)

        payload = ctx.exception.as_payload()
        self.assertEqual(payload["code"], "validation_error")
        self.assertEqual(payload["field"], "quantity")
        self.assertEqual(payload["line"], 4)

    def test_oversized_amount_is_validation_error(self):
        with self.assertRaises(DocumentValidationError) as ctx:
            compute_line(
                quantity=10**27, unit_price="999999999999.99", tax_rate="5", line_index=0
            )

        self.assertEqual(ctx.exception.field, "quantity")
        self.assertEqual(ctx.exception.line_index, 0)


class DocumentTotalTests(SimpleTestCase):
    def test_sum_of_line_totals(self):
        lines = [
            compute_line(quantity=1, unit_price="17000", tax_rate="5"),
            compute_line(quantity=2, unit_price="2500", tax_rate="18"),
        ]

        self.assertEqual(document_total(lines), Decimal("23750.00"))

    def test_empty(self):
        self.assertEqual(document_total([]), Decimal("0.00"))

    def test_accepts_generator(self):
        amounts = LineAmounts(
            quantity=Decimal("1"),
            unit_price=Decimal("1.00"),
            tax_rate=Decimal("0"),
            untaxed_amount=Decimal("1.00"),
            tax_amount=Decimal("0.00"),
            total_amount=Decimal("1.00"),
        )
        self.assertEqual(document_total(a for a in [amounts, amounts]), Decimal("2.00"))
