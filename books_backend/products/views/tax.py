# products/views/tax.py

"""
TAX VIEWSET

Purpose:
- Read-only tax lookups (bill lines reference a tax by its percentage value)
- Filter by scope / computation_method
"""

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated

from products.models import Tax
from products.serializers.tax import TaxSerializer


@extend_schema_view(
    list=extend_schema(tags=["catalog"]),
    retrieve=extend_schema(tags=["catalog"]),
)
class TaxViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = TaxSerializer
    permission_classes = [IsAuthenticated]
    queryset = Tax.objects.all().order_by("value", "name")
    filterset_fields = ["scope", "computation_method", "is_active"]
