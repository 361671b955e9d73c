from typing import ClassVar

from resume_analyzer.analysis.analyzer import ResumeAnalyzer
from resume_analyzer.analysis.base import BaseResumeAnalyzer
from resume_analyzer.analysis.document_fetcher import DocumentFetcher
from resume_analyzer.analysis.example_client_adapter import ExampleClientAdapter
from resume_analyzer.analysis.openai_client_adapter import OpenAIClientAdapter
from resume_analyzer.config.settings import Settings
from resume_analyzer.pdf.factory import PdfExtractorFactory


class AnalyzerFactory:
    """Creates the configured resume analyzer."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseResumeAnalyzer:
        """Create a configured analyzer from application settings."""
        provider = settings.analysis_provider.strip().lower()
        fetcher = DocumentFetcher(
            timeout_seconds=settings.analysis_fetch_timeout_seconds,
            max_document_bytes=settings.analysis_max_document_bytes,
        )
        if provider == "example":
            return ResumeAnalyzer(
                client=ExampleClientAdapter(),
                model="example",
                max_document_bytes=settings.analysis_max_document_bytes,
                fetcher=fetcher,
            )
        base_url = cls._resolve_base_url(provider, settings)
        attachment_mode = settings.analysis_attachment_mode.strip().lower()
        pdf_extractor = (
            PdfExtractorFactory.create(settings.pdf_engine)
            if attachment_mode == "text"
            else None
        )
        client = OpenAIClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=cls._resolve_timeout_seconds(provider, settings),
            base_url=base_url,
            max_retries=settings.analysis_max_retries,
            attachment_mode=attachment_mode,
            pdf_extractor=pdf_extractor,
        )
        return ResumeAnalyzer(
            client=client,
            model=cls._resolve_model_name(provider, settings),
            temperature=settings.analysis_temperature,
            max_document_bytes=settings.analysis_max_document_bytes,
            fetcher=fetcher,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.analysis_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "analysis_openai_compatible_base_url is required for "
                    "analysis_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown analysis provider '{provider}'. Choose from: {supported}"
        )

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.analysis_openai_api_key,
            "openai_compatible": settings.analysis_openai_compatible_api_key,
            "openrouter": settings.analysis_openrouter_api_key,
            "gemini": settings.analysis_gemini_api_key,
            "ollama": settings.analysis_ollama_api_key,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.analysis_openai_model_name,
            "openai_compatible": settings.analysis_openai_compatible_model_name,
            "openrouter": settings.analysis_openrouter_model_name,
            "gemini": settings.analysis_gemini_model_name,
            "ollama": settings.analysis_ollama_model_name,
        }
        model = key_map.get(provider, "")
        if not model:
            raise ValueError(f"analysis_{provider}_model_name is required")
        return model

    @classmethod
    def _resolve_timeout_seconds(cls, provider: str, settings: Settings) -> int:
        key_map = {
            "openai": settings.analysis_openai_timeout_seconds,
            "openai_compatible": settings.analysis_openai_compatible_timeout_seconds,
            "openrouter": settings.analysis_openrouter_timeout_seconds,
            "gemini": settings.analysis_gemini_timeout_seconds,
            "ollama": settings.analysis_ollama_timeout_seconds,
        }
        return key_map.get(provider, 60) or 60
