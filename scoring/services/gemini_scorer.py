import json
import logging

from ..constants import MAX_CARBON_ESTIMATE, RECOMMENDATIONS
from .base import ScoreResult, ScoringFailed, evidence_cid, submission_digest
from .gemini_client import GeminiClient
from .simulated import recommend
from .validators import ResponseParser

logger = logging.getLogger(__name__)


class GeminiScorer:

    def __init__(self, client=None):
        self.client = client or GeminiClient()
        self.parser = ResponseParser()

    def score(self, project_data, raw_data):
        prompt = self._get_prompt(project_data, raw_data)

        success, response, error, response_time = self.client.call_with_retry(prompt)
        if not success:
            logger.warning("score: Gemini call failed for project %s - %s", project_data.get('id'), error)
            raise ScoringFailed(error or "Scoring model unavailable")

        json_ok, data, parse_err = self.parser.parse_json(response)
        if not json_ok or not isinstance(data, dict):
            logger.warning("score: JSON parse failed for project %s - %s", project_data.get('id'), parse_err)
            raise ScoringFailed(parse_err or "Scoring model returned an unexpected reply")

        health = max(0.0, min(1.0, self.parser.as_number(data.get('biomass_health_score'))))
        estimate = max(0.0, self.parser.as_number(data.get('carbon_estimate')))
        if estimate > float(MAX_CARBON_ESTIMATE):
            logger.warning("score: implausible carbon estimate for project %s - %s", project_data.get('id'), estimate)
            raise ScoringFailed("Scoring model returned an implausible carbon estimate")

        recommendation = str(data.get('recommendation', '')).upper().strip()
        if recommendation not in RECOMMENDATIONS:
            recommendation = recommend(health)

        risk_factors = data.get('risk_factors', [])
        if not isinstance(risk_factors, list):
            risk_factors = []

        result = ScoreResult(
            carbon_estimate=estimate,
            biomass_health_score=health,
            evidence_cid=evidence_cid(submission_digest(project_data, raw_data)),
            recommendation=recommendation,
            risk_factors=[str(f) for f in risk_factors],
            model_version=self.client.model_name,
        )

        logger.info(
            "score: project=%s estimate=%s health=%s recommendation=%s time_ms=%s",
            project_data.get('id'), result.carbon_estimate, result.biomass_health_score,
            result.recommendation, response_time,
        )
        return result

    def _get_prompt(self, project_data, raw_data):
        return f"""You assess blue carbon restoration projects from their monitoring data.

Project:
{json.dumps(project_data, indent=2, default=str)}

Monitoring, reporting and verification data:
{json.dumps(raw_data, indent=2, default=str)}

Return ONLY this JSON (no other text):
{{
  "carbon_estimate": 120.5,
  "biomass_health_score": 0.82,
  "recommendation": "APPROVE",
  "risk_factors": ["sparse sensor coverage"]
}}

Rules:
- carbon_estimate is annual sequestration in tonnes CO2e for the whole project area, never negative
- biomass_health_score is between 0 and 1
- recommendation is one of APPROVE, REVIEW, REJECT
- risk_factors lists short phrases, empty when there are none"""
