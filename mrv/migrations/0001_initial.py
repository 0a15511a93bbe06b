import uuid

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("projects", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="MRVData",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("raw_data", models.JSONField(default=dict)),
                ("files", models.JSONField(blank=True, default=list)),
                ("status", models.CharField(choices=[("pending", "Pending"), ("approved", "Approved"), ("rejected", "Rejected")], db_index=True, default="pending", max_length=20)),
                ("submitted_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("carbon_estimate", models.DecimalField(decimal_places=3, max_digits=14, validators=[django.core.validators.MinValueValidator(0)])),
                ("biomass_health_score", models.DecimalField(decimal_places=3, max_digits=4, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(1)])),
                ("evidence_cid", models.CharField(blank=True, max_length=128)),
                ("recommendation", models.CharField(max_length=10)),
                ("risk_factors", models.JSONField(blank=True, default=list)),
                ("model_version", models.CharField(blank=True, max_length=50)),
                ("verification_notes", models.TextField(blank=True)),
                ("verified_at", models.DateTimeField(blank=True, null=True)),
                ("manager", models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="mrv_submissions", to=settings.AUTH_USER_MODEL)),
                ("project", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="mrv_submissions", to="projects.project")),
                ("verified_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="mrv_decisions", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "verbose_name": "MRV data",
                "verbose_name_plural": "MRV data",
                "db_table": "mrv_data",
                "ordering": ["-submitted_at"],
                "indexes": [models.Index(fields=["project", "status"], name="mrv_project_status_idx")],
            },
        ),
    ]
