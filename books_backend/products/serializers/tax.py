# products/serializers/tax.py

from rest_framework import serializers

from products.models import Tax


class TaxSerializer(serializers.ModelSerializer):
    class Meta:
        model = Tax
        fields = ("id", "name", "computation_method", "scope", "value", "is_active")
        read_only_fields = fields
