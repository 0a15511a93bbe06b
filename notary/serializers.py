from rest_framework import serializers
from .models import ChainTransaction


class ChainTransactionSerializer(serializers.ModelSerializer):
    txHash = serializers.CharField(source="tx_hash", read_only=True)
    entityType = serializers.CharField(source="entity_type", read_only=True)
    entityId = serializers.CharField(source="entity_id", read_only=True)
    anchorBlock = serializers.IntegerField(source="anchor_block", read_only=True)
    blockNumber = serializers.IntegerField(source="block_number", read_only=True)
    gasUsed = serializers.IntegerField(source="gas_used", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    checkedAt = serializers.DateTimeField(source="checked_at", read_only=True)

    class Meta:
        model = ChainTransaction
        fields = [
            "txHash", "action", "entityType", "entityId", "status",
            "anchorBlock", "blockNumber", "gasUsed", "createdAt", "checkedAt",
        ]
