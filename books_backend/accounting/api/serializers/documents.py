# accounting/api/serializers/documents.py

"""
SHARED DOCUMENT SERIALIZERS

Input (plain Serializers):
- request shape and the quantity ceiling; ranges (quantity > 0, price > 0, 0 <= tax <= 100)
  are checked by the line-item calculator so errors name the line index

Output (ModelSerializers, concrete model set by each app):
- money as decimal strings
- lines rendered in stored order
"""

from rest_framework import serializers

# PositiveIntegerField ceiling on the line models
MAX_LINE_QUANTITY = 2_147_483_647


# ============================================================
# INPUT
# ============================================================


class OrderLineInputSerializer(serializers.Serializer):
    product_id = serializers.IntegerField()
    tax_id = serializers.IntegerField()
    quantity = serializers.IntegerField(max_value=MAX_LINE_QUANTITY)
    unit_price = serializers.DecimalField(max_digits=14, decimal_places=2)


class OrderCreateSerializer(serializers.Serializer):
    contact_id = serializers.IntegerField()
    reference = serializers.CharField(required=False, allow_blank=True, default="")
    order_date = serializers.DateField(required=False)
    lines = OrderLineInputSerializer(many=True, allow_empty=False)


class BillLineInputSerializer(serializers.Serializer):
    product_name = serializers.CharField()
    account_name = serializers.CharField()
    tax_rate = serializers.DecimalField(max_digits=6, decimal_places=2)
    quantity = serializers.IntegerField(max_value=MAX_LINE_QUANTITY)
    unit_price = serializers.DecimalField(max_digits=14, decimal_places=2)


class BillCreateBaseSerializer(serializers.Serializer):
    bill_date = serializers.DateField(required=False)
    due_date = serializers.DateField(required=False, allow_null=True)
    bill_reference = serializers.CharField(
        required=False, allow_blank=True, allow_null=True
    )

    def validate(self, attrs):
        bill_date = attrs.get("bill_date")
        due_date = attrs.get("due_date")
        if bill_date and due_date and due_date < bill_date:
            raise serializers.ValidationError(
                {"due_date": "due_date cannot be before bill_date"}
            )
        return attrs


class SettlementCreateSerializer(serializers.Serializer):
    bill_id = serializers.IntegerField()
    payment_date = serializers.DateField(required=False)
    journal_id = serializers.IntegerField(
        help_text="Settlement account id (must be an Assets account)"
    )
    note = serializers.CharField(required=False, allow_blank=True, default="")


# ============================================================
# OUTPUT
# ============================================================


def _line_payload(line) -> dict:
    payload = {
        "id": line.id,
        "product_id": line.product_id,
        "product_name": line.product.name,
        "tax_id": line.tax_id,
        "tax_rate": str(line.tax_rate),
        "quantity": line.quantity,
        "unit_price": str(line.unit_price),
        "untaxed_amount": str(line.untaxed_amount),
        "tax_amount": str(line.tax_amount),
        "total_amount": str(line.total_amount),
    }
    if hasattr(line, "account_id"):
        payload["account_id"] = line.account_id
        payload["account_name"] = line.account.name
    return payload


class DocumentWithLinesSerializer(serializers.ModelSerializer):
    contact_name = serializers.CharField(source="contact.name", read_only=True)
    lines = serializers.SerializerMethodField()

    def get_lines(self, obj) -> list[dict]:
        related = ["product"]
        if hasattr(obj.lines.model, "account"):
            related.append("account")
        return [_line_payload(line) for line in obj.lines.select_related(*related).order_by("id")]


class OrderReadSerializer(DocumentWithLinesSerializer):
    class Meta:
        fields = (
            "id",
            "number",
            "contact",
            "contact_name",
            "order_date",
            "reference",
            "total_amount",
            "status",
            "created_at",
            "lines",
        )
        read_only_fields = fields


class BillReadSerializer(DocumentWithLinesSerializer):
    class Meta:
        fields = (
            "id",
            "number",
            "contact",
            "contact_name",
            "bill_date",
            "due_date",
            "bill_reference",
            "total_amount",
            "status",
            "created_at",
            "lines",
        )
        read_only_fields = fields


class PaymentReadSerializer(serializers.ModelSerializer):
    contact_name = serializers.CharField(source="contact.name", read_only=True)
    bill_number = serializers.CharField(source="bill.number", read_only=True)
    journal_name = serializers.CharField(source="journal.name", read_only=True)

    class Meta:
        fields = (
            "id",
            "number",
            "payment_type",
            "amount",
            "payment_date",
            "contact",
            "contact_name",
            "bill",
            "bill_number",
            "journal",
            "journal_name",
            "note",
            "created_at",
        )
        read_only_fields = fields
