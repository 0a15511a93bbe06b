"""Scoring strategy contract.

A scorer is any object with ``score(project_data, raw_data) -> ScoreResult``.
The active one is named by ``settings.SCORING_BACKEND``.
"""
import hashlib
import json
import logging
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP

from django.conf import settings
from django.utils.module_loading import import_string

from ..constants import MAX_CARBON_ESTIMATE, RECOMMENDATIONS

logger = logging.getLogger(__name__)

ESTIMATE_QUANTUM = Decimal('0.001')


class ScoringFailed(Exception):
    pass


@dataclass
class ScoreResult:
    carbon_estimate: Decimal
    biomass_health_score: Decimal
    evidence_cid: str
    recommendation: str
    risk_factors: list = field(default_factory=list)
    model_version: str = ''

    def __post_init__(self):
        estimate = max(Decimal('0'), _decimal(self.carbon_estimate))
        if not estimate.is_finite() or estimate > Decimal(MAX_CARBON_ESTIMATE):
            raise ScoringFailed(f"Carbon estimate {estimate} is out of range")
        self.carbon_estimate = estimate.quantize(ESTIMATE_QUANTUM, rounding=ROUND_HALF_UP)
        self.biomass_health_score = min(Decimal('1'), max(Decimal('0'), _decimal(self.biomass_health_score))).quantize(
            ESTIMATE_QUANTUM, rounding=ROUND_HALF_UP
        )
        if self.recommendation not in RECOMMENDATIONS:
            raise ValueError(f"Unknown recommendation: {self.recommendation}")

    def as_ml_results(self):
        return {
            'carbon_estimate': self.carbon_estimate,
            'biomass_health_score': self.biomass_health_score,
            'evidenceCid': self.evidence_cid,
            'recommendation': self.recommendation,
            'riskFactors': list(self.risk_factors),
            'modelVersion': self.model_version,
        }


def _decimal(value):
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def submission_digest(project_data, raw_data):
    document = json.dumps(
        {'project': project_data, 'rawData': raw_data},
        sort_keys=True,
        default=str,
    )
    return hashlib.sha256(document.encode()).hexdigest()


def evidence_cid(digest):
    return f"bafk{digest[:52]}"


def project_features(project):
    return {
        'id': str(project.id),
        'name': project.name,
        'location': project.location,
        'ecosystemType': project.ecosystem_type,
        'area': str(project.area),
    }


def get_scorer():
    return import_string(settings.SCORING_BACKEND)()
