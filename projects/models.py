import uuid
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class Project(models.Model):
    class EcosystemType(models.TextChoices):
        MANGROVE = "mangrove", "Mangrove"
        SALTMARSH = "saltmarsh", "Saltmarsh"
        SEAGRASS = "seagrass", "Seagrass"
        COASTAL_WETLAND = "coastal_wetland", "Coastal Wetland"

    class Status(models.TextChoices):
        REGISTERED = "registered", "Registered"
        MRV_SUBMITTED = "mrv_submitted", "MRV Submitted"
        APPROVED = "approved", "Approved"
        REJECTED = "rejected", "Rejected"

    TERMINAL_STATUSES = (Status.APPROVED, Status.REJECTED)

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    description = models.TextField()
    location = models.CharField(max_length=255)
    ecosystem_type = models.CharField(
        max_length=20,
        choices=EcosystemType.choices,
        db_index=True,
    )
    area = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        help_text="Project area in hectares",
    )
    coordinates = models.CharField(max_length=255, blank=True)
    community_partners = models.TextField(blank=True)
    expected_carbon_capture = models.DecimalField(
        max_digits=14,
        decimal_places=3,
        null=True,
        blank=True,
        help_text="Expected sequestration in tCO2e",
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.REGISTERED,
        db_index=True,
    )
    manager = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="projects",
    )
    on_chain_tx_hash = models.CharField(max_length=66, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "projects"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["manager", "status"], name="projects_manager_status_idx"),
        ]

    def save(self, *args, **kwargs):
        if self.name:
            self.name = self.name.strip()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name
