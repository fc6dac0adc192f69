# accounting/api/serializers/accounts.py

from rest_framework import serializers

from accounting.models import Account


class AccountListSerializer(serializers.ModelSerializer):
    """
    Read-only serializer for listing accounts.
    UI needs: name, type, balance (and id for settlement requests).
    """

    class Meta:
        model = Account
        fields = ("id", "name", "account_type", "current_balance", "is_active")
        read_only_fields = fields
