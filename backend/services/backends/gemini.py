"""Google Gemini backend."""

import logging

from google import genai
from google.genai import types

from config import settings
from services.backends.base import GenerativeBackend
from services.errors import BackendUnavailable

logger = logging.getLogger(__name__)


class GeminiBackend(GenerativeBackend):
    name = "gemini"
    display_name = "Google GenAI"

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        temperature: float = 0.7,
        max_output_tokens: int = 4096,
    ) -> None:
        self.api_key = settings.gemini_api_key if api_key is None else api_key
        self.model = model or settings.gemini_model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self._client: genai.Client | None = None

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def get_client(self) -> genai.Client:
        if not self.is_configured:
            raise BackendUnavailable("No GEMINI_API_KEY set - Gemini disabled")
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(self, prompt: str) -> str:
        client = self.get_client()
        try:
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=self.temperature,
                    max_output_tokens=self.max_output_tokens,
                ),
            )
        except Exception as e:
            raise BackendUnavailable(f"Gemini API error: {e}") from e

        text = (response.text or "").strip()
        if not text:
            raise BackendUnavailable("Gemini returned an empty response")
        logger.info("Gemini response received, length: %d", len(text))
        return text
