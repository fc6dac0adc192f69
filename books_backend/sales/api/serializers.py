# sales/api/serializers.py

from rest_framework import serializers

from accounting.api.serializers import (
    BillCreateBaseSerializer,
    BillLineInputSerializer,
    BillReadSerializer,
    OrderReadSerializer,
    PaymentReadSerializer,
)
from sales.models import SalesBill, SalesOrder, SalesPayment


class SalesOrderSerializer(OrderReadSerializer):
    class Meta(OrderReadSerializer.Meta):
        model = SalesOrder


class SalesBillSerializer(BillReadSerializer):
    sales_order_number = serializers.CharField(
        source="sales_order.number", read_only=True, default=None
    )

    class Meta(BillReadSerializer.Meta):
        model = SalesBill
        fields = BillReadSerializer.Meta.fields + ("sales_order", "sales_order_number")
        read_only_fields = fields


class SalesBillCreateSerializer(BillCreateBaseSerializer):
    sales_order_id = serializers.IntegerField(required=False, allow_null=True)
    customer_name = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    line_items = BillLineInputSerializer(many=True, required=False)

    def validate(self, attrs):
        attrs = super().validate(attrs)
        if not attrs.get("sales_order_id") and not attrs.get("line_items"):
            raise serializers.ValidationError(
                {"line_items": "line_items are required when sales_order_id is not given"}
            )
        if not attrs.get("sales_order_id") and not (attrs.get("customer_name") or "").strip():
            raise serializers.ValidationError(
                {"customer_name": "customer_name is required when sales_order_id is not given"}
            )
        return attrs


class SalesPaymentSerializer(PaymentReadSerializer):
    class Meta(PaymentReadSerializer.Meta):
        model = SalesPayment
