# contacts/api/views.py

"""
CONTACTS API

GET  /api/contacts/   list partners (filter role / is_active, ?search= on name)
POST /api/contacts/   create a partner
GET  /api/contacts/<id>/
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from rest_framework.generics import ListCreateAPIView, RetrieveAPIView
from rest_framework.permissions import IsAuthenticated

from contacts.api.serializers import ContactSerializer
from contacts.models import Contact

logger = logging.getLogger(__name__)


@extend_schema_view(
    get=extend_schema(
        tags=["contacts"],
        parameters=[
            OpenApiParameter(
                name="search",
                required=False,
                type=str,
                description="Case-insensitive match on contact name",
            ),
        ],
    ),
    post=extend_schema(tags=["contacts"]),
)
class ContactListCreateView(ListCreateAPIView):
    permission_classes = [IsAuthenticated]
    serializer_class = ContactSerializer
    filterset_fields = ["role", "is_active"]

    def get_queryset(self):
        qs = Contact.objects.all().order_by("name")
        search = (self.request.query_params.get("search") or "").strip()
        if search:
            qs = qs.filter(name__icontains=search)
        return qs

    def perform_create(self, serializer):
        contact = serializer.save()
        logger.info(
            "Contact created",
            extra={"contact_id": contact.pk, "role": contact.role},
        )


@extend_schema(tags=["contacts"])
class ContactDetailView(RetrieveAPIView):
    permission_classes = [IsAuthenticated]
    serializer_class = ContactSerializer
    queryset = Contact.objects.all()
