import os

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    gemini_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_GENAI_API_KEY"),
    )
    gemini_model: str = "gemini-2.5-flash"
    ollama_url: str = "http://localhost:11434"  # empty string disables Ollama
    ollama_model: str = "llama2"
    ollama_timeout: float = 60.0
    backend_order: list[str] = ["gemini", "ollama"]

    max_upload_size_mb: int = 10
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"

    # Resume extraction: "simple" | "strict" | "auto"
    extraction_mode: str = "auto"
    question_count: int = 5

    interview_db_path: str = "data/interviews.db"
    rate_limit: str = "20/minute"
    rate_limit_enabled: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
