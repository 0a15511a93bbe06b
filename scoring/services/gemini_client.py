import time
import logging

import google.generativeai as genai
from django.conf import settings

logger = logging.getLogger(__name__)


class GeminiClient:
    def __init__(self, model_name=None):
        if not settings.GEMINI_API_KEY:
            raise ValueError("GEMINI_API_KEY not configured in settings")

        genai.configure(api_key=settings.GEMINI_API_KEY)
        self.model_name = model_name or settings.GEMINI_MODEL
        self.model = genai.GenerativeModel(self.model_name)
        self.timeout = settings.GEMINI_TIMEOUT_SECONDS

    def call(self, prompt, temperature=0.1):
        """Returns ``(success, text, error, response_time_ms)``."""
        start_time = time.time()
        try:
            response = self.model.generate_content(
                prompt,
                generation_config={
                    'temperature': temperature,
                    'response_mime_type': 'application/json',
                },
                request_options={'timeout': self.timeout},
            )
            text = response.text
        except Exception as e:
            error_msg = str(e)
            logger.error("call: Gemini API error - %s", error_msg)

            lowered = error_msg.lower()
            if 'quota' in lowered:
                error_msg = "API quota exceeded"
            elif 'api key' in lowered:
                error_msg = "Invalid API key"
            elif 'rate limit' in lowered:
                error_msg = "Rate limit exceeded"

            return False, None, error_msg, 0

        response_time_ms = int((time.time() - start_time) * 1000)

        if not text:
            logger.error("call: Gemini returned empty response")
            return False, None, "Empty response from API", response_time_ms

        return True, text, None, response_time_ms

    def call_with_retry(self, prompt, max_retries=None):
        """Retries default to ``settings.GEMINI_MAX_RETRIES`` with 1s, 2s, ... backoff."""
        if max_retries is None:
            max_retries = settings.GEMINI_MAX_RETRIES

        for attempt in range(max_retries + 1):
            success, text, error, response_time = self.call(prompt)

            if success:
                return success, text, error, response_time

            if attempt < max_retries:
                wait_time = 2 ** attempt
                logger.warning("call_with_retry: retrying after %ss (attempt %s/%s)", wait_time, attempt + 1, max_retries)
                time.sleep(wait_time)

        return success, text, error, response_time
