import logging
import os
import uuid

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.files.storage import default_storage
from django.db import transaction
from django.utils.text import get_valid_filename

from bluecarbon.exceptions import AccessDenied, InvalidState, NotFound, ValidationError
from projects.models import Project
from scoring.services import score_submission

from ..models import MRVData

logger = logging.getLogger("mrv.intake")

REQUIRED_FIELDS = ("projectId", "satelliteData", "communityReports")
RAW_DATA_FIELDS = ("satelliteData", "communityReports", "sensorReadings", "iotData", "notes")

FILE_CATEGORIES = {
    "photo": {"jpg", "jpeg", "png", "gif", "heic"},
    "iot_data": {"csv", "json", "xml", "txt", "log"},
    "document": {"pdf", "doc", "docx", "xlsx", "xls"},
}


def _is_blank(value):
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, dict)):
        return not value
    return False


def _flatten(payload):
    """Accept fields flat or nested under ``rawData``; flat values win."""
    merged = {}
    nested = payload.get("rawData")
    if isinstance(nested, dict):
        merged.update(nested)
    for key, value in payload.items():
        if key != "rawData":
            merged[key] = value
    return merged


def categorize_file(name):
    extension = os.path.splitext(name or "")[1].lower().lstrip(".")
    for category, extensions in FILE_CATEGORIES.items():
        if extension in extensions:
            return category
    return "other"


class MRVIntakeService:

    def __init__(self, scorer=None):
        self.scorer = scorer

    def validate_mrv_data(self, payload):
        if not isinstance(payload, dict):
            raise ValidationError("MRV data must be an object")

        data = _flatten(payload)

        for field in REQUIRED_FIELDS:
            if _is_blank(data.get(field)):
                raise ValidationError(f"Missing required field: {field}")

        files = data.get("files") or []
        if not isinstance(files, list):
            raise ValidationError("files must be a list")

        return data

    def _get_owned_project(self, project_id, identity):
        try:
            project = Project.objects.get(id=project_id)
        except (Project.DoesNotExist, ValueError, DjangoValidationError):
            raise NotFound("Project not found")

        if project.manager_id != identity.user_id:
            logger.warning(
                "mrv.project_access_denied | project_id=%s requester=%s owner=%s",
                project.id,
                identity.user_id,
                project.manager_id,
            )
            raise AccessDenied("Access denied: You can only submit data for your own projects")

        return project

    def upload_files(self, project_id, files, identity):
        if _is_blank(project_id):
            raise ValidationError("Project ID is required")

        if not files:
            raise ValidationError("No files provided")

        project = self._get_owned_project(project_id, identity)

        manifest = []
        for upload in files:
            original_name = os.path.basename(upload.name or "upload")
            stored_name = f"{uuid.uuid4().hex}_{get_valid_filename(original_name)}"
            path = default_storage.save(f"mrv/{project.id}/{stored_name}", upload)

            manifest.append({
                "name": original_name,
                "size": upload.size,
                "type": getattr(upload, "content_type", None) or "application/octet-stream",
                "category": categorize_file(original_name),
                "path": path,
            })

        logger.info(
            "mrv.files_uploaded | project_id=%s manager=%s count=%s",
            project.id,
            identity.user_id,
            len(manifest),
        )
        return manifest

    def _manifest(self, files):
        manifest = []
        for entry in files:
            if isinstance(entry, str):
                entry = {"name": entry}
            if not isinstance(entry, dict) or _is_blank(entry.get("name")):
                raise ValidationError("Each file entry needs a name")

            manifest.append({
                "name": entry["name"],
                "size": entry.get("size") or 0,
                "type": entry.get("type") or "application/octet-stream",
                "category": entry.get("category") or categorize_file(entry["name"]),
                **({"path": entry["path"]} if entry.get("path") else {}),
            })
        return manifest

    def submit_mrv_data(self, payload, identity):
        data = self.validate_mrv_data(payload)

        project = self._get_owned_project(data["projectId"], identity)
        if project.status in Project.TERMINAL_STATUSES:
            raise InvalidState(f"Cannot submit MRV data for a project that is {project.status}")

        raw_data = {field: data[field] for field in RAW_DATA_FIELDS if field in data}
        files = self._manifest(data.get("files") or [])

        # scoring happens before anything is written
        result = score_submission(project, raw_data, scorer=self.scorer)

        with transaction.atomic():
            project = Project.objects.select_for_update().get(pk=project.pk)
            if project.status in Project.TERMINAL_STATUSES:
                raise InvalidState(f"Cannot submit MRV data for a project that is {project.status}")

            mrv = MRVData.objects.create(
                project=project,
                manager_id=identity.user_id,
                raw_data=raw_data,
                files=files,
                status=MRVData.Status.PENDING,
                carbon_estimate=result.carbon_estimate,
                biomass_health_score=result.biomass_health_score,
                evidence_cid=result.evidence_cid,
                recommendation=result.recommendation,
                risk_factors=result.risk_factors,
                model_version=result.model_version,
            )

            if project.status == Project.Status.REGISTERED:
                project.status = Project.Status.MRV_SUBMITTED
                project.save(update_fields=["status", "updated_at"])

        logger.info(
            "mrv.submitted | mrv_id=%s project_id=%s estimate=%s recommendation=%s",
            mrv.id,
            project.id,
            mrv.carbon_estimate,
            mrv.recommendation,
        )
        return mrv

    def get_pending_mrv(self):
        return list(
            MRVData.objects.filter(status=MRVData.Status.PENDING)
            .select_related("project", "manager")
            .order_by("submitted_at")
        )
