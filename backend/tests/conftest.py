"""Shared test configuration, pytest markers, and isolation fixtures."""

import os

# No network backends, no rate limiting; must run before config is imported
os.environ["GEMINI_API_KEY"] = ""
os.environ["GOOGLE_GENAI_API_KEY"] = ""
os.environ["OLLAMA_URL"] = ""
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["EXTRACTION_MODE"] = "auto"

import pytest  # noqa: E402

from config import settings  # noqa: E402
from services.backends.registry import clear as clear_backends  # noqa: E402


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the FastAPI app through TestClient"
    )


@pytest.fixture(autouse=True)
def _reset_backends():
    """Clear backend registry before each test."""
    clear_backends()
    yield
    clear_backends()


@pytest.fixture(autouse=True)
def _isolated_db(tmp_path, monkeypatch):
    """Point the interview store at a fresh database per test."""
    monkeypatch.setattr(settings, "interview_db_path", str(tmp_path / "interviews.db"))
