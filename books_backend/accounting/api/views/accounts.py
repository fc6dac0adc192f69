# accounting/api/views/accounts.py

"""
PATH: accounting/api/views/accounts.py

ACCOUNTS API (READ-ONLY)

GET /api/accounts/
Lists accounts (filter by account_type / is_active). Settlement requests
reference these ids as journal_id.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework.generics import ListAPIView
from rest_framework.permissions import IsAuthenticated

from accounting.api.serializers.accounts import AccountListSerializer
from accounting.models import Account


@extend_schema(tags=["accounting"])
class AccountListView(ListAPIView):
    permission_classes = [IsAuthenticated]
    serializer_class = AccountListSerializer
    queryset = Account.objects.all().order_by("name")
    filterset_fields = ["account_type", "is_active"]
