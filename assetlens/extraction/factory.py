import threading
from typing import ClassVar

from assetlens.config.settings import Settings
from assetlens.extraction.base import BaseExtractor
from assetlens.extraction.example_client_adapter import ExampleClientAdapter
from assetlens.extraction.extractor import Extractor
from assetlens.extraction.openai_client_adapter import OpenAIClientAdapter


class ExtractorFactory:
    """Creates the extractor for a provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "glm": "https://open.bigmodel.cn/api/paas/v4",
    }

    @classmethod
    def supported_providers(cls) -> list[str]:
        return ["example", "openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]

    @classmethod
    def create(cls, settings: Settings, provider: str | None = None) -> BaseExtractor:
        """Create an extractor for provider, defaulting to settings.extraction_provider."""
        provider = (provider or settings.extraction_provider).lower()
        if provider == "example":
            return Extractor(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
            )
        base_url = cls._resolve_base_url(provider, settings)
        api_key = cls._resolve_api_key(provider, settings)
        if not api_key:
            raise ValueError(f"Missing API key for extraction provider '{provider}'")
        model = cls._resolve_model_name(provider, settings).strip()
        if not model:
            raise ValueError(f"Missing model name for extraction provider '{provider}'")
        client = OpenAIClientAdapter(
            api_key=api_key,
            timeout_seconds=cls._resolve_timeout_seconds(provider, settings),
            base_url=base_url,
        )
        return Extractor(
            client=client,
            model=model,
            temperature=settings.extraction_temperature,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "openai_compatible_base_url is required for "
                    "extraction_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        raise ValueError(
            f"Unknown extraction provider '{provider}'. Choose from: {cls.supported_providers()}"
        )

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "gemini": settings.gemini_api_key,
            "glm": settings.glm_api_key,
            "openai": settings.openai_api_key,
            "openai_compatible": settings.openai_compatible_api_key,
        }
        return key_map.get(provider, "")

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "gemini": settings.gemini_model_name,
            "glm": settings.glm_model_name,
            "openai": settings.openai_model_name,
            "openai_compatible": settings.openai_compatible_model_name,
        }
        return key_map.get(provider, "")

    @classmethod
    def _resolve_timeout_seconds(cls, provider: str, settings: Settings) -> int:
        key_map = {
            "gemini": settings.gemini_timeout_seconds,
            "glm": settings.glm_timeout_seconds,
            "openai": settings.openai_timeout_seconds,
            "openai_compatible": settings.openai_compatible_timeout_seconds,
        }
        return key_map.get(provider, 30) or 30


class ExtractorRegistry:
    """Lazily builds and caches one extractor per provider."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._lock = threading.Lock()
        self._extractors: dict[str, BaseExtractor] = {}

    def get(self, provider: str) -> BaseExtractor:
        key = provider.lower()
        with self._lock:
            extractor = self._extractors.get(key)
            if extractor is None:
                extractor = ExtractorFactory.create(self._settings, key)
                self._extractors[key] = extractor
            return extractor
