# accounting/api/views/balance_sheet.py

"""
PATH: accounting/api/views/balance_sheet.py

BALANCE SHEET API VIEW

GET /api/balance-sheet/

Simplified position: cash & bank balances plus open receivables against
open payables and retained earnings. `balance` is reported as a diagnostic
and is not forced to zero.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounting.services.statements import generate_balance_sheet


class BalanceSheetView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(tags=["reports"], responses={200: dict})
    def get(self, request):
        return Response(generate_balance_sheet(), status=status.HTTP_200_OK)
