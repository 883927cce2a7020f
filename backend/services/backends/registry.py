"""Lazy backend registry: global singletons created on first use."""

import logging

from config import settings
from services.backends.base import GenerativeBackend

logger = logging.getLogger(__name__)

_registry: dict[str, GenerativeBackend] = {}


def _create_backend(name: str) -> GenerativeBackend:
    """Factory: create a backend by name with deferred imports."""
    if name == "gemini":
        from services.backends.gemini import GeminiBackend
        return GeminiBackend()
    elif name == "ollama":
        from services.backends.ollama import OllamaBackend
        return OllamaBackend()
    else:
        raise ValueError(f"Unknown backend: {name}")


def get_backend(name: str) -> GenerativeBackend:
    """Get a backend by name, creating it on first access."""
    if name not in _registry:
        _registry[name] = _create_backend(name)
    return _registry[name]


def register(backend: GenerativeBackend) -> None:
    """Install a backend instance under its name (replaces any existing one)."""
    _registry[backend.name] = backend


def get_backend_chain(order: list[str] | None = None) -> list[GenerativeBackend]:
    """Configured backends in preference order. Unknown names are skipped."""
    chain = []
    for name in order if order is not None else settings.backend_order:
        try:
            backend = get_backend(name)
        except ValueError:
            logger.warning("Ignoring unknown backend in BACKEND_ORDER: %s", name)
            continue
        if backend.is_configured:
            chain.append(backend)
        else:
            logger.debug("Backend %s not configured, skipping", name)
    return chain


def configured_backends() -> dict[str, bool]:
    """Name -> configured flag for every backend in the configured order."""
    status = {}
    for name in settings.backend_order:
        try:
            status[name] = get_backend(name).is_configured
        except ValueError:
            continue
    return status


def clear() -> None:
    """Drop all backend instances. Useful for testing."""
    _registry.clear()
