import logging
from collections import Counter
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction

from accounts.identity import lookup_user
from bluecarbon.exceptions import AccessDenied, InvalidState, NotFound, ValidationError
from notary.services import notarize

from ..models import Project

logger = logging.getLogger("projects.services")

REQUIRED_FIELDS = ("name", "description", "location", "ecosystemType", "area")

# payload key -> max length, None for unbounded text
TEXT_FIELDS = {
    "name": 255,
    "description": None,
    "location": 255,
    "coordinates": 255,
    "communityPartners": None,
}

UNKNOWN_MANAGER_NAME = "Unknown Manager"
UNKNOWN_MANAGER_EMAIL = "N/A"


def _column_decimal(value, field, column):
    """Round ``value`` to the precision of ``column`` and check it fits."""
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(f"{field} must be a number")
    if not number.is_finite():
        raise ValidationError(f"{field} must be a number")

    places = column.decimal_places
    limit = Decimal(10) ** (column.max_digits - places)
    if abs(number) >= limit:
        raise ValidationError(f"{field} must be less than {limit}")

    number = number.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    if abs(number) >= limit:
        raise ValidationError(f"{field} must be less than {limit}")
    return number


def _is_blank(value):
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


class ProjectService:

    def __init__(self, notary=None):
        self.notary = notary

    def validate_project_data(self, data):
        """Check a project payload and return the values to store."""
        if not isinstance(data, dict):
            raise ValidationError("Project data must be an object")

        for field in REQUIRED_FIELDS:
            if _is_blank(data.get(field)):
                raise ValidationError(f"Missing required field: {field}")

        cleaned = {}
        for field, max_length in TEXT_FIELDS.items():
            value = data.get(field)
            if value is None:
                cleaned[field] = ""
                continue
            if not isinstance(value, str):
                raise ValidationError(f"{field} must be a string")
            value = value.strip()
            if max_length and len(value) > max_length:
                raise ValidationError(f"{field} cannot exceed {max_length} characters")
            cleaned[field] = value

        area = _column_decimal(data["area"], "area", Project._meta.get_field("area"))
        if area <= 0:
            raise ValidationError("Project area must be greater than 0")
        cleaned["area"] = area

        if data["ecosystemType"] not in Project.EcosystemType.values:
            raise ValidationError("Invalid ecosystem type")
        cleaned["ecosystemType"] = data["ecosystemType"]

        expected = data.get("expectedCarbonCapture")
        if _is_blank(expected):
            cleaned["expectedCarbonCapture"] = None
        else:
            expected = _column_decimal(
                expected, "expectedCarbonCapture", Project._meta.get_field("expected_carbon_capture")
            )
            if expected < 0:
                raise ValidationError("Expected carbon capture cannot be negative")
            cleaned["expectedCarbonCapture"] = expected

        return cleaned

    def create_project(self, data, identity):
        cleaned = self.validate_project_data(data)

        with transaction.atomic():
            project = Project.objects.create(
                name=cleaned["name"],
                description=cleaned["description"],
                location=cleaned["location"],
                ecosystem_type=cleaned["ecosystemType"],
                area=cleaned["area"],
                coordinates=cleaned["coordinates"],
                community_partners=cleaned["communityPartners"],
                expected_carbon_capture=cleaned["expectedCarbonCapture"],
                status=Project.Status.REGISTERED,
                manager_id=identity.user_id,
            )

        logger.info(
            "project.created | project_id=%s manager=%s ecosystem=%s",
            project.id,
            identity.user_id,
            project.ecosystem_type,
        )

        tx_hash = notarize(
            "project.registered",
            project,
            {
                "name": project.name,
                "location": project.location,
                "ecosystemType": project.ecosystem_type,
                "area": str(project.area),
                "managerId": str(identity.user_id),
            },
            notary=self.notary,
        )
        if tx_hash is None:
            logger.warning("project.created_without_chain_record | project_id=%s", project.id)

        return project

    def get_manager_projects(self, manager_id):
        projects = list(Project.objects.filter(manager_id=manager_id))
        logger.info("project.manager_listing | manager=%s count=%s", manager_id, len(projects))
        return projects

    def get_all_projects(self):
        projects = list(Project.objects.all())

        for project in projects:
            try:
                manager = lookup_user(project.manager_id)
                project.manager_name = manager.full_name or UNKNOWN_MANAGER_NAME
                project.manager_email = manager.email or UNKNOWN_MANAGER_EMAIL
            except NotFound:
                logger.warning(
                    "project.manager_lookup_failed | project_id=%s manager=%s",
                    project.id,
                    project.manager_id,
                )
                project.manager_name = UNKNOWN_MANAGER_NAME
                project.manager_email = UNKNOWN_MANAGER_EMAIL

        return projects

    def get_project(self, project_id):
        try:
            return Project.objects.get(id=project_id)
        except (Project.DoesNotExist, ValueError, DjangoValidationError):
            raise NotFound("Project not found")

    @transaction.atomic
    def delete_project(self, project_id, identity):
        try:
            project = Project.objects.select_for_update().get(id=project_id)
        except (Project.DoesNotExist, ValueError, DjangoValidationError):
            raise NotFound("Project not found")

        if project.manager_id != identity.user_id:
            logger.warning(
                "project.delete_denied | project_id=%s requester=%s owner=%s",
                project_id,
                identity.user_id,
                project.manager_id,
            )
            raise AccessDenied("Access denied: You can only delete your own projects")

        if project.status != Project.Status.REGISTERED:
            raise InvalidState("Cannot delete project: Only unverified projects can be deleted")

        project.delete()
        logger.info("project.deleted | project_id=%s manager=%s", project_id, identity.user_id)

    def get_project_stats(self, projects):
        by_status = Counter(project.status for project in projects)
        by_ecosystem = Counter(project.ecosystem_type for project in projects)

        return {
            "total": len(projects),
            "byStatus": dict(by_status),
            "byEcosystem": dict(by_ecosystem),
            "totalArea": sum((project.area for project in projects), Decimal("0")),
            "totalExpectedCapture": sum(
                (project.expected_carbon_capture or Decimal("0") for project in projects),
                Decimal("0"),
            ),
        }
