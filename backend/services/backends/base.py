"""Abstract base class for generative text backends."""

from abc import ABC, abstractmethod


class GenerativeBackend(ABC):
    """Prompt in, free text out.

    Subclasses must implement:
        - name: identifier used in the backend registry and in responses
        - is_configured: whether the backend can be called at all
        - generate(prompt): return generated text or raise BackendUnavailable
    """

    name: str = ""
    display_name: str = ""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """False when required settings (API key, URL) are missing."""

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Return non-empty generated text. Raises BackendUnavailable."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
