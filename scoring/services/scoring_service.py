import logging

from django.core.exceptions import ValidationError as DjangoValidationError

from bluecarbon.exceptions import ExternalServiceError, NotFound
from projects.models import Project

from ..models import MLVerification
from .base import ScoringFailed, get_scorer, project_features

logger = logging.getLogger(__name__)


def score_submission(project, raw_data, scorer=None):
    """Score MRV data for ``project``. Any scorer failure becomes ``ExternalServiceError``."""
    project_data = project_features(project)

    try:
        scorer = scorer or get_scorer()
        return scorer.score(project_data, raw_data)
    except ScoringFailed as e:
        logger.error("score_submission: scoring failed for project %s - %s", project.id, e)
        raise ExternalServiceError(f"Scoring service unavailable: {e}")
    except Exception as e:
        logger.exception("score_submission: unexpected scorer error for project %s", project.id)
        raise ExternalServiceError("Scoring service unavailable") from e


def _get_project(project_id):
    try:
        return Project.objects.get(id=project_id)
    except (Project.DoesNotExist, ValueError, DjangoValidationError):
        raise NotFound("Project not found")


def verify_project(project_id, identity, scorer=None):
    project = _get_project(project_id)

    latest_mrv = project.mrv_submissions.order_by('-submitted_at').first()
    raw_data = latest_mrv.raw_data if latest_mrv else {}

    result = score_submission(project, raw_data, scorer=scorer)

    verification = MLVerification.objects.create(
        project=project,
        verifier_id=identity.user_id,
        carbon_estimate=result.carbon_estimate,
        biomass_health_score=result.biomass_health_score,
        evidence_cid=result.evidence_cid,
        recommendation=result.recommendation,
        risk_factors=result.risk_factors,
        model_version=result.model_version,
    )

    logger.info(
        "verify_project: project=%s verifier=%s recommendation=%s",
        project.id, identity.user_id, verification.recommendation,
    )
    return verification


def get_verification_result(project_id):
    project = _get_project(project_id)

    verification = project.ml_verifications.order_by('-created_at').first()
    if verification is None:
        raise NotFound("No ML verification found for this project")
    return verification
