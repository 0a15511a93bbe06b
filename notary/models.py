import uuid
from django.db import models


class ChainTransaction(models.Model):
    STATUS_CHOICES = [
        ("pending", "Pending"),
        ("confirmed", "Confirmed"),
        ("failed", "Failed"),
    ]

    ACTION_CHOICES = [
        ("project.registered", "Project Registered"),
        ("credit.issued", "Credit Issued"),
        ("credit.retired", "Credit Retired"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    tx_hash = models.CharField(max_length=66, unique=True, db_index=True)
    action = models.CharField(max_length=40, choices=ACTION_CHOICES, db_index=True)
    entity_type = models.CharField(max_length=40)
    entity_id = models.CharField(max_length=64, db_index=True)

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="pending", db_index=True)
    anchor_block = models.BigIntegerField(null=True, blank=True)
    block_number = models.BigIntegerField(null=True, blank=True)
    gas_used = models.BigIntegerField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    checked_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "chain_transactions"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["entity_type", "entity_id"], name="chain_tx_entity_idx"),
        ]

    def __str__(self):
        return f"{self.action} {self.tx_hash}"
