"""
Application configuration via pydantic-settings.

Loads values from .env file with sensible defaults for local development.
Use ``get_settings()`` to obtain the cached singleton instance.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Review Assistant settings loaded from environment / .env file.

    All settings can be overridden via environment variables or a `.env` file.
    Field names map directly to env var names (case-insensitive).

    Attributes:
        review_api_base_url: Base URL of the external review-generation backend.
        retry_attempts: Total attempts when a connection cannot be established.
        llm_types: Provider choices offered in the sidebar.
        model_sizes: Model tier choices offered in the sidebar.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Silently ignore unrecognized env vars
    )

    # --- Review backend ---
    review_api_base_url: str = "http://localhost:8000"
    review_path: str = "/generate_review"
    self_review_path: str = "/generate_self_review"
    transcribe_path: str = "/transcribe_audio"
    health_path: str = "/health"

    # Seconds; generation waits on an LLM so it gets more room than httpx's default
    request_timeout: float = 60.0
    transcription_timeout: float = 120.0
    health_timeout: float = 5.0
    retry_attempts: int = 3

    # --- Sidebar choices ---
    default_llm_type: str = "openai"
    default_model_size: str = "small"
    llm_types: list[str] = ["openai", "anthropic", "groq"]
    model_sizes: list[str] = ["small", "medium", "large"]

    # --- Audio ---
    upload_sample_rate: int = 16000  # Whisper-family models expect 16 kHz mono

    # --- Application ---
    log_level: str = "INFO"  # Python logging level


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings singleton.

    Uses ``functools.lru_cache`` so the .env file is read only once.
    Subsequent calls return the same ``Settings`` instance.

    Returns:
        Settings: The application-wide configuration object.
    """
    return Settings()
