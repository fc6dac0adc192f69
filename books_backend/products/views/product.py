# products/views/product.py

"""
PRODUCT VIEWSET

Purpose:
- Read-only product lookups (documents reference products by id or name)
- Filter by product_type / is_active
"""

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated

from products.models import Product
from products.serializers.product import ProductSerializer


@extend_schema_view(
    list=extend_schema(tags=["catalog"]),
    retrieve=extend_schema(tags=["catalog"]),
)
class ProductViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = ProductSerializer
    permission_classes = [IsAuthenticated]
    queryset = Product.objects.select_related("sales_tax", "purchase_tax").order_by("name")
    filterset_fields = ["product_type", "is_active"]
