import django.core.validators
import django.db.models.deletion
import uuid
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Project",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("location", models.CharField(max_length=255)),
                (
                    "ecosystem_type",
                    models.CharField(
                        choices=[
                            ("mangrove", "Mangrove"),
                            ("saltmarsh", "Saltmarsh"),
                            ("seagrass", "Seagrass"),
                            ("coastal_wetland", "Coastal Wetland"),
                        ],
                        db_index=True,
                        max_length=20,
                    ),
                ),
                (
                    "area",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Project area in hectares",
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                ("coordinates", models.CharField(blank=True, max_length=255)),
                ("community_partners", models.TextField(blank=True)),
                (
                    "expected_carbon_capture",
                    models.DecimalField(
                        blank=True,
                        decimal_places=3,
                        help_text="Expected sequestration in tCO2e",
                        max_digits=14,
                        null=True,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("registered", "Registered"),
                            ("mrv_submitted", "MRV Submitted"),
                            ("approved", "Approved"),
                            ("rejected", "Rejected"),
                        ],
                        db_index=True,
                        default="registered",
                        max_length=20,
                    ),
                ),
                ("on_chain_tx_hash", models.CharField(blank=True, max_length=66, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "manager",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="projects",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "projects",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["manager", "status"], name="projects_manager_status_idx"),
                ],
            },
        ),
    ]
