import os
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
    app_version: str = "1.0.0"
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    debug: bool = False

    # Completion settings shared by extraction and scoring
    llm_temperature: float = 0.3
    llm_max_output_tokens: int = 500
    # Career suggestions run a little warmer and shorter
    suggestion_temperature: float = 0.5
    suggestion_max_output_tokens: int = 200

    # Per-route rate limits (slowapi syntax)
    default_rate_limit: str = "100/minute"
    strict_rate_limit: str = "10/minute"

    # External job feed (RemoteOK)
    external_jobs_url: str = "https://remoteok.com/api"
    external_jobs_user_agent: str = "Employly Job Portal"
    external_jobs_ttl_seconds: float = 300.0
    external_jobs_limit: int = 20
    external_jobs_timeout_seconds: float = 10.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "protected_namespaces": ("settings_",)}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
