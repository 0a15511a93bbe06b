import uuid
from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class MLVerification(models.Model):
    RECOMMENDATION_CHOICES = [
        ('APPROVE', 'Approve'),
        ('REVIEW', 'Review'),
        ('REJECT', 'Reject'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    project = models.ForeignKey('projects.Project', on_delete=models.CASCADE, related_name='ml_verifications')
    verifier = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='ml_verifications',
    )

    carbon_estimate = models.DecimalField(max_digits=14, decimal_places=3, validators=[MinValueValidator(0)])
    biomass_health_score = models.DecimalField(
        max_digits=4,
        decimal_places=3,
        validators=[MinValueValidator(0), MaxValueValidator(1)],
    )
    evidence_cid = models.CharField(max_length=128, blank=True)
    recommendation = models.CharField(max_length=10, choices=RECOMMENDATION_CHOICES)
    risk_factors = models.JSONField(default=list, blank=True)
    model_version = models.CharField(max_length=50)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'ml_verifications'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['project', '-created_at'], name='ml_verif_project_created_idx'),
        ]

    def __str__(self):
        return f"{self.project_id} - {self.recommendation}"
