import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction

from bluecarbon.exceptions import NotFound, ValidationError
from notary.services import notarize

from ..models import CarbonCredit, CreditHolding, Retirement

logger = logging.getLogger("credits.ledger")

AMOUNT_QUANTUM = Decimal("0.001")
ZERO = Decimal("0")


def parse_amount(value):
    if value is None or isinstance(value, bool):
        raise ValidationError("Amount is required")

    try:
        amount = Decimal(str(value).strip())
        if not amount.is_finite():
            raise InvalidOperation
        amount = amount.quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError):
        raise ValidationError("Amount must be a number")

    if amount <= ZERO:
        raise ValidationError("Amount must be greater than 0")
    return amount


def _lock_credit(credit_id):
    try:
        return CarbonCredit.objects.select_for_update().get(id=credit_id)
    except (CarbonCredit.DoesNotExist, ValueError, DjangoValidationError):
        raise NotFound("Credit not found")


def issue_credit(mrv):
    """Issue the credit for an approved MRV record. Runs inside the caller's transaction."""
    if mrv.carbon_estimate <= ZERO:
        logger.warning("credit.issue_skipped | mrv_id=%s reason=zero_estimate", mrv.id)
        return None

    credit = CarbonCredit.objects.create(
        project_id=mrv.project_id,
        mrv=mrv,
        amount=mrv.carbon_estimate,
        remaining_balance=mrv.carbon_estimate,
        available_balance=mrv.carbon_estimate,
        health_score=mrv.biomass_health_score,
        evidence_cid=mrv.evidence_cid,
        verified_at=mrv.verified_at,
    )

    logger.info(
        "credit.issued | credit_id=%s mrv_id=%s project_id=%s amount=%s",
        credit.id,
        mrv.id,
        mrv.project_id,
        credit.amount,
    )
    return credit


def notarize_credit(credit, notary=None):
    return notarize(
        "credit.issued",
        credit,
        {
            "projectId": str(credit.project_id),
            "mrvId": str(credit.mrv_id),
            "amount": str(credit.amount),
            "evidenceCid": credit.evidence_cid,
        },
        notary=notary,
    )


def list_available():
    return list(
        CarbonCredit.objects.filter(
            is_retired=False,
            owner__isnull=True,
            available_balance__gt=ZERO,
        ).select_related("project")
    )


def purchase(credit_id, identity, amount):
    amount = parse_amount(amount)

    with transaction.atomic():
        credit = _lock_credit(credit_id)

        if credit.is_retired or amount > credit.available_balance:
            logger.warning(
                "credit.purchase_rejected | credit_id=%s buyer=%s amount=%s available=%s",
                credit.id,
                identity.user_id,
                amount,
                credit.available_balance,
            )
            raise ValidationError(
                f"Purchase amount exceeds available balance ({credit.available_balance} tCO2e)"
            )

        holding, _ = CreditHolding.objects.select_for_update().get_or_create(
            credit=credit,
            buyer_id=identity.user_id,
        )
        holding.balance += amount
        holding.save(update_fields=["balance", "updated_at"])

        credit.available_balance -= amount
        if credit.available_balance == ZERO:
            credit.owner_id = identity.user_id
        credit.save(update_fields=["available_balance", "owner", "updated_at"])

    logger.info(
        "credit.purchased | credit_id=%s buyer=%s amount=%s available=%s",
        credit.id,
        identity.user_id,
        amount,
        credit.available_balance,
    )
    return holding


def retire(credit_id, identity, amount, reason, notary=None):
    amount = parse_amount(amount)

    if not isinstance(reason, str) or not reason.strip():
        raise ValidationError("Retirement reason is required")

    with transaction.atomic():
        credit = _lock_credit(credit_id)

        holding = (
            CreditHolding.objects.select_for_update()
            .filter(credit=credit, buyer_id=identity.user_id)
            .first()
        )
        held = holding.balance if holding else ZERO
        retirable = held + credit.available_balance

        if amount > retirable:
            logger.warning(
                "credit.retire_rejected | credit_id=%s buyer=%s amount=%s retirable=%s",
                credit.id,
                identity.user_id,
                amount,
                retirable,
            )
            raise ValidationError(f"Retirement amount exceeds available balance ({retirable} tCO2e)")

        from_holding = min(held, amount)
        from_market = amount - from_holding

        if from_holding:
            holding.balance -= from_holding
            holding.save(update_fields=["balance", "updated_at"])

        if from_market:
            credit.available_balance -= from_market
            if credit.available_balance == ZERO:
                credit.owner_id = identity.user_id

        credit.remaining_balance -= amount
        if credit.remaining_balance == ZERO:
            credit.is_retired = True
        credit.save(update_fields=["available_balance", "remaining_balance", "owner", "is_retired", "updated_at"])

        retirement = Retirement.objects.create(
            credit=credit,
            buyer_id=identity.user_id,
            amount=amount,
            reason=reason.strip(),
        )

    logger.info(
        "credit.retired | retirement_id=%s credit_id=%s buyer=%s amount=%s remaining=%s",
        retirement.id,
        credit.id,
        identity.user_id,
        amount,
        credit.remaining_balance,
    )

    notarize(
        "credit.retired",
        retirement,
        {
            "creditId": str(credit.id),
            "buyerId": str(identity.user_id),
            "amount": str(amount),
            "reason": retirement.reason,
        },
        notary=notary,
    )
    return retirement


def get_buyer_holdings(buyer_id):
    return list(
        CreditHolding.objects.filter(buyer_id=buyer_id, balance__gt=ZERO)
        .select_related("credit", "credit__project")
    )


def get_buyer_retirements(buyer_id):
    return list(
        Retirement.objects.filter(buyer_id=buyer_id).select_related("credit", "credit__project")
    )
