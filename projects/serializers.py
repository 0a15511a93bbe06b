from rest_framework import serializers
from .models import Project


class ProjectSerializer(serializers.ModelSerializer):
    ecosystemType = serializers.CharField(source="ecosystem_type", read_only=True)
    communityPartners = serializers.CharField(source="community_partners", read_only=True)
    expectedCarbonCapture = serializers.DecimalField(
        source="expected_carbon_capture",
        max_digits=14,
        decimal_places=3,
        read_only=True,
    )
    managerId = serializers.UUIDField(source="manager_id", read_only=True)
    onChainTxHash = serializers.CharField(source="on_chain_tx_hash", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Project
        fields = [
            "id",
            "name",
            "description",
            "location",
            "ecosystemType",
            "area",
            "coordinates",
            "communityPartners",
            "expectedCarbonCapture",
            "status",
            "managerId",
            "onChainTxHash",
            "createdAt",
        ]
        read_only_fields = fields


class ProjectWithManagerSerializer(ProjectSerializer):
    managerName = serializers.CharField(source="manager_name", read_only=True)
    managerEmail = serializers.CharField(source="manager_email", read_only=True)

    class Meta(ProjectSerializer.Meta):
        fields = ProjectSerializer.Meta.fields + ["managerName", "managerEmail"]
        read_only_fields = fields
