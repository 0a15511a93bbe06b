import logging

from django.conf import settings
from django.core.mail import send_mail

logger = logging.getLogger("mrv.notifications")


def send_decision_email(mrv, credit=None):
    """Tell the submitting manager how their MRV data was decided. Returns False on failure."""
    manager = mrv.manager
    if manager is None or not manager.email:
        logger.warning("mrv.decision_email_skipped | mrv_id=%s reason=no_manager", mrv.id)
        return False

    project = mrv.project
    approved = mrv.status == mrv.Status.APPROVED

    subject = f"MRV data {'approved' if approved else 'rejected'}: {project.name}"
    lines = [
        f"Hello {manager.full_name or manager.email},",
        "",
        f"The MRV data submitted for {project.name} has been {mrv.status}.",
    ]
    if credit is not None:
        lines.append(f"{credit.amount} tCO2e of carbon credits have been issued to the marketplace.")
    if mrv.verification_notes:
        lines += ["", "Verifier notes:", mrv.verification_notes]
    lines += ["", f"View your projects: {settings.FRONTEND_URL}"]

    try:
        send_mail(
            subject=subject,
            message="\n".join(lines),
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[manager.email],
            fail_silently=False,
        )
    except Exception as e:
        logger.error(
            "mrv.decision_email_failed | mrv_id=%s recipient=%s error=%s",
            mrv.id,
            manager.email,
            e,
            exc_info=True,
        )
        return False

    logger.info("mrv.decision_email_sent | mrv_id=%s recipient=%s", mrv.id, manager.email)
    return True
