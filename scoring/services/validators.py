import json
import re
import logging

logger = logging.getLogger(__name__)


class ResponseParser:

    @staticmethod
    def parse_json(text):
        if not text:
            logger.warning("parse_json: received empty text")
            return False, None, "Empty response"

        try:
            return True, json.loads(text.strip()), None
        except json.JSONDecodeError:
            pass

        # strip markdown fences
        cleaned = re.sub(r'```(?:json)?\s*', '', text).replace('```', '').strip()
        try:
            return True, json.loads(cleaned), None
        except json.JSONDecodeError:
            pass

        start = text.find('{')
        end = text.rfind('}')
        if start != -1 and end > start:
            try:
                return True, json.loads(text[start:end + 1]), None
            except json.JSONDecodeError:
                pass

        logger.error("parse_json: no valid JSON found. preview: %s", text[:300])
        return False, None, f"No valid JSON found: {text[:200]}"

    @staticmethod
    def as_number(value, default=0.0):
        try:
            number = float(value)
        except (TypeError, ValueError):
            logger.warning("as_number: cannot convert %r, using %s", value, default)
            return default
        if number != number or number in (float('inf'), float('-inf')):
            return default
        return number
