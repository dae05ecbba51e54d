from typing import ClassVar

from adreview.analysis.base import BaseAnalysisService
from adreview.analysis.example_client_adapter import ExampleClientAdapter
from adreview.analysis.openai_client_adapter import OpenAIClientAdapter
from adreview.analysis.service import AnalysisService
from adreview.config.settings import Settings


class AnalysisServiceFactory:
    """Creates the analysis service for the configured provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalysisService:
        """Create a configured analysis service from application settings."""
        provider = settings.analysis_provider.strip().lower()
        if provider == "example":
            return AnalysisService(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
            )
        base_url = cls._resolve_base_url(provider, settings)
        client = OpenAIClientAdapter(
            api_key=cls._provider_setting(provider, settings, "api_key"),
            timeout_seconds=cls._provider_setting(provider, settings, "timeout_seconds"),
            base_url=base_url,
        )
        return AnalysisService(
            client=client,
            model=cls._provider_setting(provider, settings, "model_name"),
            temperature=settings.analysis_temperature,
            max_tokens=settings.analysis_max_tokens,
        )

    @classmethod
    def supported_providers(cls) -> list[str]:
        return ["example", "openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]

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
        base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if base_url is None:
            raise ValueError(
                f"Unknown analysis provider '{provider}'. "
                f"Choose from: {cls.supported_providers()}"
            )
        return base_url

    @staticmethod
    def _provider_setting(provider: str, settings: Settings, field: str):  # type: ignore[no-untyped-def]
        return getattr(settings, f"analysis_{provider}_{field}")
