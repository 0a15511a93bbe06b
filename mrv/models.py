import uuid
from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class MRVData(models.Model):
    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        APPROVED = "approved", "Approved"
        REJECTED = "rejected", "Rejected"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    project = models.ForeignKey(
        "projects.Project",
        on_delete=models.CASCADE,
        related_name="mrv_submissions",
    )
    manager = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name="mrv_submissions",
    )

    # satelliteData, communityReports, sensorReadings, iotData, notes
    raw_data = models.JSONField(default=dict)
    # [{name, size, type, category, path}]
    files = models.JSONField(default=list, blank=True)

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
        db_index=True,
    )
    submitted_at = models.DateTimeField(auto_now_add=True, db_index=True)

    # written once at submission
    carbon_estimate = models.DecimalField(
        max_digits=14,
        decimal_places=3,
        validators=[MinValueValidator(0)],
    )
    biomass_health_score = models.DecimalField(
        max_digits=4,
        decimal_places=3,
        validators=[MinValueValidator(0), MaxValueValidator(1)],
    )
    evidence_cid = models.CharField(max_length=128, blank=True)
    recommendation = models.CharField(max_length=10)
    risk_factors = models.JSONField(default=list, blank=True)
    model_version = models.CharField(max_length=50, blank=True)

    verification_notes = models.TextField(blank=True)
    verified_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="mrv_decisions",
    )
    verified_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "mrv_data"
        ordering = ["-submitted_at"]
        verbose_name = "MRV data"
        verbose_name_plural = "MRV data"
        indexes = [
            models.Index(fields=["project", "status"], name="mrv_project_status_idx"),
        ]

    @property
    def is_terminal(self):
        return self.status != self.Status.PENDING

    @property
    def ml_results(self):
        return {
            "carbon_estimate": self.carbon_estimate,
            "biomass_health_score": self.biomass_health_score,
            "evidenceCid": self.evidence_cid,
            "recommendation": self.recommendation,
            "riskFactors": self.risk_factors,
            "modelVersion": self.model_version,
        }

    def __str__(self):
        return f"MRV {self.id} ({self.status})"
