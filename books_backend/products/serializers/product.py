# products/serializers/product.py

from rest_framework import serializers

from products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """
    Catalog product (read-only lookups for document entry).
    """

    sales_tax_name = serializers.CharField(source="sales_tax.name", read_only=True, default=None)
    purchase_tax_name = serializers.CharField(
        source="purchase_tax.name", read_only=True, default=None
    )

    class Meta:
        model = Product
        fields = (
            "id",
            "name",
            "product_type",
            "sales_price",
            "purchase_price",
            "hsn_code",
            "sales_tax",
            "sales_tax_name",
            "purchase_tax",
            "purchase_tax_name",
            "is_active",
        )
        read_only_fields = fields
