import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.utils import timezone

from bluecarbon.exceptions import InvalidState, NotFound, ValidationError
from credits.services import issue_credit, notarize_credit
from projects.models import Project

from ..models import MRVData
from ..notifications import send_decision_email

logger = logging.getLogger("mrv.verification")


def approve_or_reject(mrv_id, identity, approved, notes="", notary=None):
    """Decide a pending MRV record exactly once.

    Approval issues one credit for the scored carbon estimate. The project
    leaves ``mrv_submitted`` for the matching terminal status.
    """
    if not isinstance(approved, bool):
        raise ValidationError("approved must be true or false")

    notes = (notes or "").strip()

    with transaction.atomic():
        try:
            mrv = MRVData.objects.select_for_update().get(id=mrv_id)
        except (MRVData.DoesNotExist, ValueError, DjangoValidationError):
            raise NotFound("MRV data not found")

        if mrv.is_terminal:
            logger.warning(
                "mrv.decision_rejected | mrv_id=%s status=%s verifier=%s",
                mrv.id,
                mrv.status,
                identity.user_id,
            )
            raise InvalidState(f"MRV data has already been {mrv.status}")

        mrv.status = MRVData.Status.APPROVED if approved else MRVData.Status.REJECTED
        mrv.verification_notes = notes
        mrv.verified_by_id = identity.user_id
        mrv.verified_at = timezone.now()
        mrv.save(update_fields=["status", "verification_notes", "verified_by", "verified_at"])

        project = Project.objects.select_for_update().get(pk=mrv.project_id)
        if project.status == Project.Status.MRV_SUBMITTED:
            project.status = Project.Status.APPROVED if approved else Project.Status.REJECTED
            project.save(update_fields=["status", "updated_at"])

        credit = issue_credit(mrv) if approved else None

    logger.info(
        "mrv.decided | mrv_id=%s status=%s verifier=%s project_id=%s credit_id=%s",
        mrv.id,
        mrv.status,
        identity.user_id,
        project.id,
        credit.id if credit else None,
    )

    if credit is not None:
        notarize_credit(credit, notary=notary)

    send_decision_email(mrv, credit)

    mrv.issued_credit = credit
    return mrv
