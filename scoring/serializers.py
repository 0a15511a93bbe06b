from rest_framework import serializers
from .models import MLVerification


class VerifyProjectSerializer(serializers.Serializer):
    projectId = serializers.UUIDField()


class MLVerificationSerializer(serializers.ModelSerializer):
    projectId = serializers.UUIDField(source='project_id', read_only=True)
    verifierId = serializers.UUIDField(source='verifier_id', read_only=True)
    carbonEstimate = serializers.DecimalField(source='carbon_estimate', max_digits=14, decimal_places=3, read_only=True)
    biomassHealthScore = serializers.DecimalField(source='biomass_health_score', max_digits=4, decimal_places=3, read_only=True)
    evidenceCid = serializers.CharField(source='evidence_cid', read_only=True)
    riskFactors = serializers.ListField(source='risk_factors', read_only=True)
    modelVersion = serializers.CharField(source='model_version', read_only=True)
    verifiedAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = MLVerification
        fields = [
            'id', 'projectId', 'verifierId', 'carbonEstimate', 'biomassHealthScore',
            'evidenceCid', 'recommendation', 'riskFactors', 'modelVersion', 'verifiedAt',
        ]
