from rest_framework import serializers
from .models import CarbonCredit, CreditHolding, Retirement


class CarbonCreditSerializer(serializers.ModelSerializer):
    projectId = serializers.UUIDField(source='project_id', read_only=True)
    projectName = serializers.CharField(source='project.name', read_only=True)
    ecosystemType = serializers.CharField(source='project.ecosystem_type', read_only=True)
    mrvId = serializers.UUIDField(source='mrv_id', read_only=True)
    remainingBalance = serializers.DecimalField(source='remaining_balance', max_digits=14, decimal_places=3, read_only=True)
    availableBalance = serializers.DecimalField(source='available_balance', max_digits=14, decimal_places=3, read_only=True)
    ownerId = serializers.UUIDField(source='owner_id', read_only=True)
    isRetired = serializers.BooleanField(source='is_retired', read_only=True)
    healthScore = serializers.DecimalField(source='health_score', max_digits=4, decimal_places=3, read_only=True)
    evidenceCid = serializers.CharField(source='evidence_cid', read_only=True)
    verifiedAt = serializers.DateTimeField(source='verified_at', read_only=True)
    onChainTxHash = serializers.CharField(source='on_chain_tx_hash', read_only=True)

    class Meta:
        model = CarbonCredit
        fields = [
            'id', 'projectId', 'projectName', 'ecosystemType', 'mrvId', 'amount',
            'remainingBalance', 'availableBalance', 'ownerId', 'isRetired',
            'healthScore', 'evidenceCid', 'verifiedAt', 'onChainTxHash',
        ]


class CreditHoldingSerializer(serializers.ModelSerializer):
    creditId = serializers.UUIDField(source='credit_id', read_only=True)
    projectName = serializers.CharField(source='credit.project.name', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = CreditHolding
        fields = ['id', 'creditId', 'projectName', 'balance', 'updatedAt']


class RetirementSerializer(serializers.ModelSerializer):
    creditId = serializers.UUIDField(source='credit_id', read_only=True)
    buyerId = serializers.UUIDField(source='buyer_id', read_only=True)
    projectName = serializers.CharField(source='credit.project.name', read_only=True)
    retiredAt = serializers.DateTimeField(source='retired_at', read_only=True)
    onChainTxHash = serializers.CharField(source='on_chain_tx_hash', read_only=True)

    class Meta:
        model = Retirement
        fields = ['id', 'creditId', 'buyerId', 'projectName', 'amount', 'reason', 'retiredAt', 'onChainTxHash']


class PurchaseSerializer(serializers.Serializer):
    creditId = serializers.UUIDField()
    amount = serializers.CharField()


class RetireSerializer(serializers.Serializer):
    creditId = serializers.UUIDField()
    amount = serializers.CharField()
    reason = serializers.CharField(allow_blank=True, trim_whitespace=False)
