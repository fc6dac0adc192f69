# purchases/api/serializers.py

from rest_framework import serializers

from accounting.api.serializers import (
    BillCreateBaseSerializer,
    BillLineInputSerializer,
    BillReadSerializer,
    OrderReadSerializer,
    PaymentReadSerializer,
)
from purchases.models import PurchaseOrder, VendorBill, VendorPayment


class PurchaseOrderSerializer(OrderReadSerializer):
    class Meta(OrderReadSerializer.Meta):
        model = PurchaseOrder


class VendorBillSerializer(BillReadSerializer):
    purchase_order_number = serializers.CharField(
        source="purchase_order.number", read_only=True, default=None
    )

    class Meta(BillReadSerializer.Meta):
        model = VendorBill
        fields = BillReadSerializer.Meta.fields + ("purchase_order", "purchase_order_number")
        read_only_fields = fields


class VendorBillCreateSerializer(BillCreateBaseSerializer):
    purchase_order_id = serializers.IntegerField(required=False, allow_null=True)
    vendor_name = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    lines = BillLineInputSerializer(many=True, required=False)

    def validate(self, attrs):
        attrs = super().validate(attrs)
        if not attrs.get("purchase_order_id") and not attrs.get("lines"):
            raise serializers.ValidationError(
                {"lines": "lines are required when purchase_order_id is not given"}
            )
        if not attrs.get("purchase_order_id") and not (attrs.get("vendor_name") or "").strip():
            raise serializers.ValidationError(
                {"vendor_name": "vendor_name is required when purchase_order_id is not given"}
            )
        return attrs


class VendorPaymentSerializer(PaymentReadSerializer):
    class Meta(PaymentReadSerializer.Meta):
        model = VendorPayment
