# accounting/api/views/profit_and_loss.py

"""
PATH: accounting/api/views/profit_and_loss.py

PROFIT & LOSS (P&L) API VIEW

GET /api/profit-loss/?start_date=YYYY-MM-DD&end_date=YYYY-MM-DD

Cash-basis snapshot: receipts from customers vs payments to vendors,
optionally restricted to an inclusive payment-date window.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounting.api.errors import service_error_response
from accounting.services.exceptions import AccountingServiceError
from accounting.services.statements import get_profit_and_loss


class ProfitAndLossView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["reports"],
        parameters=[
            OpenApiParameter(
                name="start_date",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
                description="YYYY-MM-DD. Filters payment_date >= start_date.",
            ),
            OpenApiParameter(
                name="end_date",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
                description="YYYY-MM-DD. Filters payment_date <= end_date.",
            ),
        ],
        responses={200: dict},
    )
    def get(self, request):
        try:
            data = get_profit_and_loss(
                start_date=request.query_params.get("start_date"),
                end_date=request.query_params.get("end_date"),
            )
        except AccountingServiceError as exc:
            return service_error_response(exc, action="profit_and_loss")

        return Response(data, status=status.HTTP_200_OK)
