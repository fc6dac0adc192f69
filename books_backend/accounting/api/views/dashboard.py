# accounting/api/views/dashboard.py

"""
PATH: accounting/api/views/dashboard.py

DASHBOARD SUMMARY API VIEW

GET /api/dashboard-summary/

Sales, purchases and payments over the last 1, 7 and 30 days.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounting.services.statements import get_dashboard_summary


class DashboardSummaryView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(tags=["reports"], responses={200: dict})
    def get(self, request):
        return Response(get_dashboard_summary(), status=status.HTTP_200_OK)
