import uuid
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class CarbonCredit(models.Model):
    """Credits issued for one approved MRV record, in tCO2e.

    ``remaining_balance`` is everything not yet retired. ``available_balance``
    is the part still offered on the marketplace; the rest sits in buyers'
    holdings, so ``remaining_balance == available_balance + sum(holdings)``.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    project = models.ForeignKey('projects.Project', on_delete=models.PROTECT, related_name='credits')
    mrv = models.OneToOneField('mrv.MRVData', on_delete=models.PROTECT, related_name='credit')

    amount = models.DecimalField(max_digits=14, decimal_places=3, validators=[MinValueValidator(0)])
    remaining_balance = models.DecimalField(max_digits=14, decimal_places=3, validators=[MinValueValidator(0)])
    available_balance = models.DecimalField(max_digits=14, decimal_places=3, validators=[MinValueValidator(0)])

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='owned_credits',
    )
    is_retired = models.BooleanField(default=False, db_index=True)

    health_score = models.DecimalField(max_digits=4, decimal_places=3)
    evidence_cid = models.CharField(max_length=128, blank=True)
    verified_at = models.DateTimeField(null=True, blank=True)
    on_chain_tx_hash = models.CharField(max_length=66, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'carbon_credits'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['is_retired', 'owner'], name='credit_market_idx'),
        ]

    def __str__(self):
        return f"{self.amount} tCO2e ({self.project_id})"


class CreditHolding(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    credit = models.ForeignKey(CarbonCredit, on_delete=models.CASCADE, related_name='holdings')
    buyer = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='credit_holdings')
    balance = models.DecimalField(
        max_digits=14,
        decimal_places=3,
        default=0,
        validators=[MinValueValidator(0)],
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'credit_holdings'
        ordering = ['-updated_at']
        constraints = [
            models.UniqueConstraint(fields=['credit', 'buyer'], name='unique_credit_holding'),
        ]


class Retirement(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    credit = models.ForeignKey(CarbonCredit, on_delete=models.PROTECT, related_name='retirements')
    buyer = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name='retirements')
    amount = models.DecimalField(max_digits=14, decimal_places=3, validators=[MinValueValidator(0)])
    reason = models.TextField()
    retired_at = models.DateTimeField(auto_now_add=True, db_index=True)
    on_chain_tx_hash = models.CharField(max_length=66, null=True, blank=True)

    class Meta:
        db_table = 'retirements'
        ordering = ['-retired_at']
        indexes = [
            models.Index(fields=['buyer', '-retired_at'], name='retirement_buyer_idx'),
        ]

    def __str__(self):
        return f"{self.amount} tCO2e retired by {self.buyer_id}"
