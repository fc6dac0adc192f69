# accounting/tests/test_lifecycle.py

from django.test import SimpleTestCase

from accounting.api.errors import GENERIC_PERSISTENCE_DETAIL, service_error_response
from accounting.models import BillDocument, OrderDocument
from accounting.services.exceptions import (
    AlreadySettledError,
    DuplicateNumberError,
    InvalidAccountError,
    NotFoundError,
    NumberingIntegrityError,
)
from accounting.services.lifecycle import (
    can_convert_order,
    can_transition_bill,
    can_transition_order,
)


class _Order:
    def __init__(self, status):
        self.status = status


class LifecycleRuleTests(SimpleTestCase):
    def test_order_transitions(self):
        self.assertTrue(can_transition_order(from_status="draft", to_status="confirmed"))
        self.assertTrue(can_transition_order(from_status="draft", to_status="cancelled"))
        self.assertTrue(can_transition_order(from_status="confirmed", to_status="cancelled"))
        self.assertFalse(can_transition_order(from_status="confirmed", to_status="draft"))
        self.assertFalse(can_transition_order(from_status="cancelled", to_status="confirmed"))

    def test_bill_transitions(self):
        self.assertTrue(can_transition_bill(from_status="posted", to_status="paid"))
        self.assertFalse(can_transition_bill(from_status="draft", to_status="paid"))
        self.assertFalse(can_transition_bill(from_status="paid", to_status="cancelled"))
        self.assertFalse(can_transition_bill(from_status="cancelled", to_status="posted"))

    def test_only_live_orders_convert(self):
        self.assertTrue(can_convert_order(_Order(OrderDocument.STATUS_DRAFT)))
        self.assertTrue(can_convert_order(_Order(OrderDocument.STATUS_CONFIRMED)))
        self.assertFalse(can_convert_order(_Order(OrderDocument.STATUS_CANCELLED)))

    def test_bill_defaults_to_posted(self):
        field = next(f for f in BillDocument._meta.fields if f.name == "status")
        self.assertEqual(field.default, BillDocument.STATUS_POSTED)


class ServiceErrorResponseTests(SimpleTestCase):
    def test_status_codes(self):
        cases = [
            (NotFoundError("vendor_bill", 7), 404, "not_found"),
            (AlreadySettledError("paid"), 400, "already_settled"),
            (InvalidAccountError("no"), 400, "invalid_account"),
            (DuplicateNumberError("race"), 409, "duplicate_number"),
        ]
        for exc, status_code, code in cases:
            res = service_error_response(exc, action="test")
            self.assertEqual(res.status_code, status_code)
            self.assertEqual(res.data["code"], code)

    def test_not_found_payload_names_entity(self):
        res = service_error_response(NotFoundError("product", "Ghost"), action="test")

        self.assertEqual(res.data["entity"], "product")
        self.assertEqual(res.data["key"], "Ghost")

    def test_persistence_details_are_not_leaked(self):
        with self.assertLogs("accounting.api.errors", level="ERROR"):
            res = service_error_response(
                NumberingIntegrityError("Stored vendor_bill number 'Bill/2025/XYZ' ..."),
                action="test",
            )

        self.assertEqual(res.status_code, 500)
        self.assertEqual(res.data["detail"], GENERIC_PERSISTENCE_DETAIL)
        self.assertNotIn("XYZ", res.data["detail"])
