"""Identity gate.

Resolves the authenticated user of a request into an explicit ``Identity``
that the workflow services receive as a parameter, and performs the single
role check every role-scoped operation goes through.
"""
import logging
from dataclasses import dataclass

from django.conf import settings

from bluecarbon.exceptions import AccessDenied, NotFound, Unauthenticated

from .models import Role, User

logger = logging.getLogger("accounts.identity")


@dataclass(frozen=True)
class Identity:
    user_id: object
    role: Role
    email: str
    name: str

    @classmethod
    def from_user(cls, user):
        return cls(
            user_id=user.id,
            role=Role(user.role),
            email=user.email,
            name=user.full_name or user.email,
        )


def authenticate(request) -> Identity:
    user = getattr(request, "user", None)

    if not user or not user.is_authenticated:
        raise Unauthenticated()

    if not user.is_active:
        logger.warning("identity.inactive_user | user_id=%s", user.id)
        raise Unauthenticated("Account is inactive")

    try:
        return Identity.from_user(user)
    except ValueError:
        logger.warning("identity.unknown_role | user_id=%s role=%s", user.id, user.role)
        raise AccessDenied("Account has no valid role")


def require_role(identity: Identity, role: Role) -> None:
    if identity.role != role:
        logger.warning(
            "identity.role_denied | user_id=%s role=%s required=%s",
            identity.user_id,
            identity.role.value,
            Role(role).value,
        )
        raise AccessDenied(f"Access denied: {Role(role).label} role required")


def lookup_user(user_id) -> User:
    if user_id is None:
        raise NotFound("User not found")
    try:
        return User.objects.get(id=user_id)
    except (User.DoesNotExist, ValueError):
        raise NotFound("User not found")


def check_nccr_eligibility(email):
    """An email is eligible when its domain is, or sits under, a configured NCCR domain."""
    email = (email or "").strip().lower()

    if "@" not in email:
        return {"eligible": False, "reason": "A valid email address is required"}

    domain = email.rsplit("@", 1)[1]
    for allowed in settings.NCCR_ELIGIBLE_DOMAINS:
        allowed = allowed.lower()
        if domain == allowed or domain.endswith("." + allowed):
            return {"eligible": True, "reason": f"Email domain {domain} is an authorised NCCR domain"}

    return {
        "eligible": False,
        "reason": "NCCR verifier accounts require an official government email address",
    }
