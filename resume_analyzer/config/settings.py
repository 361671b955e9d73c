from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    analysis_provider: str = "openai"
    analysis_max_document_bytes: int = 4 * 1024 * 1024
    analysis_temperature: float = 0.0
    analysis_max_retries: int = 0
    analysis_attachment_mode: str = "file"
    analysis_fetch_timeout_seconds: int = 30

    pdf_engine: str = "pdfplumber"

    analysis_openai_api_key: str = ""
    analysis_openai_model_name: str = "gpt-4o-mini"
    analysis_openai_timeout_seconds: int = 60

    analysis_openai_compatible_api_key: str = ""
    analysis_openai_compatible_model_name: str = ""
    analysis_openai_compatible_base_url: str = ""
    analysis_openai_compatible_timeout_seconds: int = 60

    analysis_openrouter_api_key: str = ""
    analysis_openrouter_model_name: str = ""
    analysis_openrouter_timeout_seconds: int = 60

    analysis_gemini_api_key: str = ""
    analysis_gemini_model_name: str = "gemini-2.5-flash"
    analysis_gemini_timeout_seconds: int = 60

    analysis_ollama_api_key: str = "ollama"
    analysis_ollama_model_name: str = ""
    analysis_ollama_timeout_seconds: int = 120


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, built once on first use."""
    return Settings()
