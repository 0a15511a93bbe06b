import logging
import random
from decimal import Decimal

from ..constants import (
    APPROVE_MIN_HEALTH,
    DEFAULT_SEQUESTRATION_RATE,
    LARGE_AREA_HECTARES,
    REVIEW_MIN_HEALTH,
    SEQUESTRATION_RATES,
    SIMULATED_HEALTH_RANGE,
    SIMULATED_MODEL_VERSION,
)
from .base import ScoreResult, evidence_cid, submission_digest

logger = logging.getLogger(__name__)


class SimulatedScorer:
    """Deterministic stand-in for a biomass model.

    The random source is seeded from the submission itself, so identical
    submissions always receive identical scores.
    """

    def score(self, project_data, raw_data):
        digest = submission_digest(project_data, raw_data)
        rng = random.Random(int(digest, 16))

        health = round(rng.uniform(*SIMULATED_HEALTH_RANGE), 3)
        area = Decimal(str(project_data.get('area') or 0))
        rate = Decimal(SEQUESTRATION_RATES.get(project_data.get('ecosystemType'), DEFAULT_SEQUESTRATION_RATE))

        result = ScoreResult(
            carbon_estimate=area * rate * Decimal(str(health)),
            biomass_health_score=Decimal(str(health)),
            evidence_cid=evidence_cid(digest),
            recommendation=recommend(health),
            risk_factors=self._risk_factors(health, area, raw_data),
            model_version=SIMULATED_MODEL_VERSION,
        )

        logger.info(
            "score: project=%s estimate=%s health=%s recommendation=%s",
            project_data.get('id'), result.carbon_estimate, result.biomass_health_score, result.recommendation,
        )
        return result

    def _risk_factors(self, health, area, raw_data):
        factors = []
        if health < APPROVE_MIN_HEALTH:
            factors.append('low_biomass_health')
        if area > LARGE_AREA_HECTARES:
            factors.append('large_project_area')
        if not (raw_data or {}).get('sensorReadings'):
            factors.append('missing_sensor_readings')
        return factors


def recommend(health):
    if health >= APPROVE_MIN_HEALTH:
        return 'APPROVE'
    if health >= REVIEW_MIN_HEALTH:
        return 'REVIEW'
    return 'REJECT'
