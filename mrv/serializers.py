from rest_framework import serializers
from .models import MRVData


class MRVDataSerializer(serializers.ModelSerializer):
    projectId = serializers.UUIDField(source="project_id", read_only=True)
    projectName = serializers.CharField(source="project.name", read_only=True)
    managerId = serializers.UUIDField(source="manager_id", read_only=True)
    rawData = serializers.JSONField(source="raw_data", read_only=True)
    submittedAt = serializers.DateTimeField(source="submitted_at", read_only=True)
    mlResults = serializers.SerializerMethodField()
    verificationNotes = serializers.CharField(source="verification_notes", read_only=True)
    verifiedBy = serializers.UUIDField(source="verified_by_id", read_only=True)
    verifiedAt = serializers.DateTimeField(source="verified_at", read_only=True)

    class Meta:
        model = MRVData
        fields = [
            "id",
            "projectId",
            "projectName",
            "managerId",
            "rawData",
            "files",
            "status",
            "submittedAt",
            "mlResults",
            "verificationNotes",
            "verifiedBy",
            "verifiedAt",
        ]
        read_only_fields = fields

    def get_mlResults(self, obj):
        return obj.ml_results


class MRVDecisionSerializer(serializers.Serializer):
    approved = serializers.BooleanField()
    notes = serializers.CharField(required=False, allow_blank=True, default="")
