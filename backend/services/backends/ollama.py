"""Ollama backend over its HTTP generate API."""

import logging

import httpx

from config import settings
from services.backends.base import GenerativeBackend
from services.errors import BackendUnavailable

logger = logging.getLogger(__name__)


class OllamaBackend(GenerativeBackend):
    name = "ollama"
    display_name = "Ollama"

    def __init__(
        self,
        base_url: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        temperature: float = 0.7,
        num_predict: int = 1000,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (settings.ollama_url if base_url is None else base_url).rstrip("/")
        self.model = model or settings.ollama_model
        self.timeout = timeout or settings.ollama_timeout
        self.temperature = temperature
        self.num_predict = num_predict
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url)

    async def generate(self, prompt: str) -> str:
        if not self.is_configured:
            raise BackendUnavailable("No OLLAMA_URL set - Ollama disabled")

        payload = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
            "options": {"temperature": self.temperature, "num_predict": self.num_predict},
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(f"{self.base_url}/api/generate", json=payload)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            raise BackendUnavailable(f"Ollama API error: {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            raise BackendUnavailable(f"Error connecting to Ollama: {e}") from e

        text = str(data.get("response") or "").strip() if isinstance(data, dict) else ""
        if not text:
            raise BackendUnavailable("Ollama returned an empty response")
        logger.info("Ollama response received, length: %d", len(text))
        return text
