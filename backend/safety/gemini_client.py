import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from google import genai
from google.genai import types
from google.genai.errors import APIError

from .exceptions import UpstreamFailure

logger = logging.getLogger('safety')


class GeminiTextClient:
    """Thin wrapper around google-genai that returns plain text or raises UpstreamFailure."""

    def __init__(self, api_key: str, model: str):
        if not api_key:
            raise ImproperlyConfigured('GEMINI_API_KEY is not set')
        self.model = model
        self._client = genai.Client(api_key=api_key)

    def generate(self, prompt: str) -> str:
        try:
            response = self._client.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except APIError as e:
            logger.error(f"Gemini API Error: {e.code} {str(e)}")
            raise UpstreamFailure('Gemini API error') from e
        except Exception as e:
            logger.error(f"Gemini transport error: {str(e)}")
            raise UpstreamFailure('Gemini request failed') from e

        if not response.candidates or response.candidates[0].finish_reason == types.FinishReason.SAFETY:
            logger.warning(f"Gemini response blocked for model {self.model}")
            raise UpstreamFailure('Response blocked by safety filters')

        text = response.text.strip() if response.text else ""
        if not text:
            logger.error("Gemini returned an empty response")
            raise UpstreamFailure('Empty response')

        return text


def get_text_client() -> GeminiTextClient:
    return GeminiTextClient(api_key=settings.GEMINI_API_KEY, model=settings.GEMINI_MODEL)
