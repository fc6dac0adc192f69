# contacts/tests/test_contacts.py

from django.core.exceptions import ValidationError
from django.test import TestCase
from rest_framework.test import APIClient

from accounting.tests.factories import make_contact, make_user
from contacts.models import Contact


class ContactModelTests(TestCase):
    def test_bucket_per_role(self):
        vendor = make_contact("Azure Interior", Contact.ROLE_VENDOR)
        customer = make_contact("Deco Addict", Contact.ROLE_CUSTOMER)
        both = make_contact("Gemini Furniture", Contact.ROLE_BOTH)

        self.assertEqual(vendor.bucket_for(Contact.SIDE_PURCHASE), "Creditor")
        self.assertEqual(customer.bucket_for(Contact.SIDE_SALES), "Debtor")
        self.assertEqual(both.bucket_for(Contact.SIDE_PURCHASE), "Creditor")
        self.assertEqual(both.bucket_for(Contact.SIDE_SALES), "Debtor")

    def test_acts_on(self):
        vendor = make_contact("Azure Interior", Contact.ROLE_VENDOR)

        self.assertTrue(vendor.acts_on(Contact.SIDE_PURCHASE))
        self.assertFalse(vendor.acts_on(Contact.SIDE_SALES))

    def test_name_is_unique(self):
        make_contact("Azure Interior")

        with self.assertRaises(ValidationError):
            make_contact("Azure Interior", email="other@example.test")

    def test_email_normalized(self):
        contact = make_contact("Wood Corner", email="  Accounts@WoodCorner.TEST ")

        self.assertEqual(contact.email, "accounts@woodcorner.test")


class ContactApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(user=make_user())

    def test_create_and_list(self):
        res = self.client.post(
            "/api/contacts/",
            {"name": "Azure Interior", "email": "AP@Azure.test", "role": "vendor", "city": "Mumbai"},
            format="json",
        )

        self.assertEqual(res.status_code, 201, res.data)
        self.assertEqual(res.data["email"], "ap@azure.test")

        make_contact("Deco Addict", Contact.ROLE_CUSTOMER)

        listed = self.client.get("/api/contacts/")
        self.assertEqual(listed.data["count"], 2)

        vendors = self.client.get("/api/contacts/", {"role": "vendor"})
        self.assertEqual([c["name"] for c in vendors.data["results"]], ["Azure Interior"])

        found = self.client.get("/api/contacts/", {"search": "deco"})
        self.assertEqual([c["name"] for c in found.data["results"]], ["Deco Addict"])

    def test_duplicate_name_rejected(self):
        make_contact("Azure Interior")

        res = self.client.post(
            "/api/contacts/",
            {"name": "Azure Interior", "email": "new@azure.test", "role": "vendor"},
            format="json",
        )

        self.assertEqual(res.status_code, 400)
        self.assertIn("name", res.data)

    def test_invalid_role_rejected(self):
        res = self.client.post(
            "/api/contacts/",
            {"name": "Someone", "email": "someone@example.test", "role": "partner"},
            format="json",
        )

        self.assertEqual(res.status_code, 400)
        self.assertIn("role", res.data)

    def test_detail(self):
        contact = make_contact("Azure Interior")

        res = self.client.get(f"/api/contacts/{contact.id}/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["role"], "vendor")
