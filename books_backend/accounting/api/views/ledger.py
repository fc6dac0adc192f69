# accounting/api/views/ledger.py

"""
PATH: accounting/api/views/ledger.py

PARTNER LEDGER API VIEW

GET /api/ledger/?contact_id=<id>

Bills (+) and payments (-) of every partner, ordered by partner, date and
reference, with a running balance that restarts per partner.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounting.api.serializers.ledger_entries import LedgerSerializer
from accounting.services.ledger_service import build_ledger, partner_balances


class LedgerView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["reports"],
        parameters=[
            OpenApiParameter(
                name="contact_id",
                type=int,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Restrict the ledger to one partner.",
            ),
        ],
        responses={200: LedgerSerializer},
    )
    def get(self, request):
        contact_raw = request.query_params.get("contact_id")
        contact_id = None
        if contact_raw not in (None, ""):
            try:
                contact_id = int(contact_raw)
            except (TypeError, ValueError):
                return Response(
                    {"detail": "contact_id must be an integer", "code": "validation_error"},
                    status=status.HTTP_400_BAD_REQUEST,
                )

        entries = build_ledger(contact_id=contact_id)

        return Response(
            {
                "count": len(entries),
                "results": [e.as_dict() for e in entries],
                "closing_balances": partner_balances(entries),
            },
            status=status.HTTP_200_OK,
        )
