import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ChainTransaction",
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
                ("tx_hash", models.CharField(db_index=True, max_length=66, unique=True)),
                (
                    "action",
                    models.CharField(
                        choices=[
                            ("project.registered", "Project Registered"),
                            ("credit.issued", "Credit Issued"),
                            ("credit.retired", "Credit Retired"),
                        ],
                        db_index=True,
                        max_length=40,
                    ),
                ),
                ("entity_type", models.CharField(max_length=40)),
                ("entity_id", models.CharField(db_index=True, max_length=64)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("confirmed", "Confirmed"),
                            ("failed", "Failed"),
                        ],
                        db_index=True,
                        default="pending",
                        max_length=20,
                    ),
                ),
                ("anchor_block", models.BigIntegerField(blank=True, null=True)),
                ("block_number", models.BigIntegerField(blank=True, null=True)),
                ("gas_used", models.BigIntegerField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("checked_at", models.DateTimeField(blank=True, null=True)),
            ],
            options={
                "db_table": "chain_transactions",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["entity_type", "entity_id"], name="chain_tx_entity_idx"),
                ],
            },
        ),
    ]
