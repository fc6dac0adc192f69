# purchases/tests/test_purchase_orders.py

from datetime import date
from decimal import Decimal

from django.test import TestCase
from rest_framework.test import APIClient

from accounting.services.exceptions import (
    DocumentValidationError,
    InvalidTransitionError,
    NotFoundError,
)
from accounting.tests.factories import BooksSetupMixin, make_user
from purchases.models import PurchaseOrder, PurchaseOrderLine
from purchases.services.document_service import (
    cancel_purchase_order,
    confirm_purchase_order,
    create_purchase_order,
    create_vendor_bill,
)


class PurchaseOrderServiceTests(BooksSetupMixin, TestCase):
    """
    Purchase orders.

    GUARANTEES:
    - numbered P00001, P00002, ... and created DRAFT
    - header total == sum of line totals
    - draft -> confirmed -> cancelled; cancelled is terminal
    """

    def _create(self, **overrides):
        data = {
            "contact_id": self.vendor.id,
            "order_date": date(2025, 1, 5),
            "reference": "REQ-7",
            "lines": [
                {"product_id": self.desk.id, "tax_id": self.gst_5.id, "quantity": 1, "unit_price": Decimal("17000")},
                {"product_id": self.chair.id, "tax_id": self.gst_18.id, "quantity": 4, "unit_price": Decimal("2500")},
            ],
        }
        data.update(overrides)
        return create_purchase_order(**data)

    def test_create_order(self):
        order = self._create()

        self.assertEqual(order.number, "P00001")
        self.assertEqual(order.status, PurchaseOrder.STATUS_DRAFT)
        self.assertEqual(order.contact, self.vendor)
        self.assertEqual(order.reference, "REQ-7")
        # 17850.00 + 4 * 2500 * 1.18
        self.assertEqual(order.total_amount, Decimal("29650.00"))

        lines = list(order.lines.order_by("id"))
        self.assertEqual(len(lines), 2)
        self.assertEqual(lines[1].tax_rate, Decimal("18.00"))
        self.assertEqual(lines[1].tax_amount, Decimal("1800.00"))
        self.assertEqual(sum(line.total_amount for line in lines), order.total_amount)

    def test_numbers_increase(self):
        first = self._create()
        second = self._create()

        self.assertEqual((first.number, second.number), ("P00001", "P00002"))

    def test_unknown_product_creates_nothing(self):
        lines = [
            {"product_id": self.desk.id, "tax_id": self.gst_5.id, "quantity": 1, "unit_price": "10"},
            {"product_id": 999999, "tax_id": self.gst_5.id, "quantity": 1, "unit_price": "10"},
        ]

        with self.assertRaises(NotFoundError) as ctx:
            self._create(lines=lines)

        self.assertEqual(ctx.exception.entity, "product")
        self.assertEqual(PurchaseOrder.objects.count(), 0)
        self.assertEqual(PurchaseOrderLine.objects.count(), 0)

    def test_invalid_line_names_index(self):
        lines = [
            {"product_id": self.desk.id, "tax_id": self.gst_5.id, "quantity": 1, "unit_price": "10"},
            {"product_id": self.desk.id, "tax_id": self.gst_5.id, "quantity": 0, "unit_price": "10"},
        ]

        with self.assertRaises(DocumentValidationError) as ctx:
            self._create(lines=lines)

        self.assertEqual(ctx.exception.line_index, 1)
        self.assertEqual(ctx.exception.field, "quantity")
        self.assertFalse(PurchaseOrder.objects.exists())

    def test_customer_cannot_be_purchase_partner(self):
        with self.assertRaises(DocumentValidationError) as ctx:
            self._create(contact_id=self.customer.id)

        self.assertEqual(ctx.exception.field, "partner")

    def test_empty_lines_rejected(self):
        with self.assertRaises(DocumentValidationError):
            self._create(lines=[])

    def test_confirm_then_cancel(self):
        order = self._create()

        order = confirm_purchase_order(order_id=order.id)
        self.assertEqual(order.status, PurchaseOrder.STATUS_CONFIRMED)

        order = cancel_purchase_order(order_id=order.id)
        self.assertEqual(order.status, PurchaseOrder.STATUS_CANCELLED)

        with self.assertRaises(InvalidTransitionError):
            confirm_purchase_order(order_id=order.id)

    def test_confirm_twice_is_invalid(self):
        order = self._create()
        confirm_purchase_order(order_id=order.id)

        with self.assertRaises(InvalidTransitionError):
            confirm_purchase_order(order_id=order.id)

    def test_cannot_cancel_billed_order(self):
        order = self._create()
        create_vendor_bill(purchase_order_id=order.id, bill_date=date(2025, 1, 6))

        with self.assertRaises(InvalidTransitionError):
            cancel_purchase_order(order_id=order.id)

    def test_missing_order(self):
        with self.assertRaises(NotFoundError):
            confirm_purchase_order(order_id=424242)


class PurchaseOrderApiTests(BooksSetupMixin, TestCase):
    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(user=make_user())

    def _payload(self, **overrides):
        data = {
            "contact_id": self.vendor.id,
            "reference": "REQ-9",
            "order_date": "2025-02-01",
            "lines": [
                {"product_id": self.desk.id, "tax_id": self.gst_5.id, "quantity": 1, "unit_price": "17000.00"},
            ],
        }
        data.update(overrides)
        return data

    def test_requires_authentication(self):
        res = APIClient().get("/api/purchase-orders/")
        self.assertEqual(res.status_code, 401)

    def test_create_and_fetch(self):
        res = self.client.post("/api/purchase-orders/", self._payload(), format="json")

        self.assertEqual(res.status_code, 201, res.data)
        self.assertEqual(res.data["number"], "P00001")
        self.assertEqual(res.data["status"], "draft")
        self.assertEqual(res.data["total_amount"], "17850.00")
        self.assertEqual(res.data["contact_name"], "Azure Interior")
        self.assertEqual(res.data["lines"][0]["tax_amount"], "850.00")

        detail = self.client.get(f"/api/purchase-orders/{res.data['id']}/")
        self.assertEqual(detail.status_code, 200)
        self.assertEqual(detail.data["number"], "P00001")
        self.assertEqual(len(detail.data["lines"]), 1)

    def test_list_is_paginated_and_filterable(self):
        self.client.post("/api/purchase-orders/", self._payload(), format="json")
        second = self.client.post("/api/purchase-orders/", self._payload(), format="json")
        self.client.post(f"/api/purchase-orders/{second.data['id']}/confirm/", format="json")

        res = self.client.get("/api/purchase-orders/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["count"], 2)

        res = self.client.get("/api/purchase-orders/", {"status": "confirmed"})
        self.assertEqual(res.data["count"], 1)
        self.assertEqual(res.data["results"][0]["number"], "P00002")

    def test_unknown_tax_is_404(self):
        payload = self._payload(
            lines=[{"product_id": self.desk.id, "tax_id": 999999, "quantity": 1, "unit_price": "10"}]
        )

        res = self.client.post("/api/purchase-orders/", payload, format="json")

        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.data["code"], "not_found")
        self.assertEqual(res.data["entity"], "tax")

    def test_bad_line_is_400_with_line_index(self):
        payload = self._payload(
            lines=[{"product_id": self.desk.id, "tax_id": self.gst_5.id, "quantity": 1, "unit_price": "0"}]
        )

        res = self.client.post("/api/purchase-orders/", payload, format="json")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data["code"], "validation_error")
        self.assertEqual(res.data["line"], 0)
        self.assertEqual(res.data["field"], "unit_price")

    def test_missing_lines_is_serializer_error(self):
        res = self.client.post("/api/purchase-orders/", self._payload(lines=[]), format="json")
        self.assertEqual(res.status_code, 400)
        self.assertIn("lines", res.data)

    def test_detail_404(self):
        res = self.client.get("/api/purchase-orders/999999/")
        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.data["code"], "not_found")

    def test_cancel_twice_is_invalid_transition(self):
        created = self.client.post("/api/purchase-orders/", self._payload(), format="json")
        url = f"/api/purchase-orders/{created.data['id']}/cancel/"

        self.assertEqual(self.client.post(url, format="json").status_code, 200)
        res = self.client.post(url, format="json")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data["code"], "invalid_transition")
