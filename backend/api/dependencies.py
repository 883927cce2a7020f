"""Shared dependencies for API routes."""

from services.backends.registry import configured_backends


def get_backend_status() -> dict[str, bool]:
    return configured_backends()
