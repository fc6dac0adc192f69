# accounting/api/serializers/ledger_entries.py

from rest_framework import serializers


class LedgerEntrySerializer(serializers.Serializer):
    """
    Schema of one derived ledger row (rows come from ledger_service as dicts).
    """

    partner_id = serializers.IntegerField()
    partner_name = serializers.CharField()
    account_bucket = serializers.ChoiceField(choices=["Creditor", "Debtor"])
    document_type = serializers.CharField()
    reference_number = serializers.CharField()
    date = serializers.DateField()
    due_date = serializers.DateField(allow_null=True)
    signed_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    running_balance = serializers.DecimalField(max_digits=14, decimal_places=2)


class PartnerBalanceSerializer(serializers.Serializer):
    partner_id = serializers.IntegerField()
    partner_name = serializers.CharField()
    account_bucket = serializers.CharField()
    closing_balance = serializers.DecimalField(max_digits=14, decimal_places=2)


class LedgerSerializer(serializers.Serializer):
    count = serializers.IntegerField()
    results = LedgerEntrySerializer(many=True)
    closing_balances = PartnerBalanceSerializer(many=True)
