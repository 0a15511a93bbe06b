from .base import ScoreResult, ScoringFailed, get_scorer, project_features
from .scoring_service import get_verification_result, score_submission, verify_project

__all__ = [
    "ScoreResult",
    "ScoringFailed",
    "get_scorer",
    "project_features",
    "score_submission",
    "verify_project",
    "get_verification_result",
]
