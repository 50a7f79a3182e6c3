"""Tests for ExtractorFactory and ExtractorRegistry."""

from unittest.mock import patch

import pytest

from assetlens.config.settings import Settings
from assetlens.extraction.base import BaseExtractor
from assetlens.extraction.extractor import Extractor
from assetlens.extraction.factory import ExtractorFactory, ExtractorRegistry


class TestExtractorFactory:
    def test_example_provider_works_offline(self) -> None:
        extractor = ExtractorFactory.create(Settings(), "example")
        assert isinstance(extractor, BaseExtractor)
        records = extractor.extract("any text", "PC-0042.html")
        assert len(records) == 1
        assert records[0].asset_tag == "PC-0042"
        assert records[0].brand == "Dell"
        assert records[0].ram_gb == "8"

    def test_defaults_to_settings_provider(self) -> None:
        settings = Settings(extraction_provider="example")
        assert isinstance(ExtractorFactory.create(settings), Extractor)

    def test_uses_gemini_endpoint(self) -> None:
        settings = Settings(gemini_api_key="g-key")
        with patch("assetlens.extraction.factory.OpenAIClientAdapter") as mock_adapter:
            ExtractorFactory.create(settings, "gemini")
        mock_adapter.assert_called_once_with(
            api_key="g-key",
            timeout_seconds=60,
            base_url="https://generativelanguage.googleapis.com/v1beta/openai/",
        )

    def test_uses_glm_endpoint(self) -> None:
        settings = Settings(glm_api_key="z-key")
        with patch("assetlens.extraction.factory.OpenAIClientAdapter") as mock_adapter:
            ExtractorFactory.create(settings, "GLM")
        mock_adapter.assert_called_once_with(
            api_key="z-key",
            timeout_seconds=60,
            base_url="https://open.bigmodel.cn/api/paas/v4",
        )

    def test_uses_openai_settings(self) -> None:
        settings = Settings(
            openai_api_key="openai-key",
            openai_model_name="gpt-4o-mini",
            openai_timeout_seconds=42,
        )
        with patch("assetlens.extraction.factory.OpenAIClientAdapter") as mock_adapter:
            ExtractorFactory.create(settings, "openai")
        mock_adapter.assert_called_once_with(
            api_key="openai-key",
            timeout_seconds=42,
            base_url=None,
        )

    def test_uses_custom_base_url_for_openai_compatible(self) -> None:
        settings = Settings(
            openai_compatible_api_key="k",
            openai_compatible_model_name="m",
            openai_compatible_base_url="https://example.com/v1",
        )
        with patch("assetlens.extraction.factory.OpenAIClientAdapter") as mock_adapter:
            ExtractorFactory.create(settings, "openai_compatible")
        mock_adapter.assert_called_once_with(
            api_key="k",
            timeout_seconds=30,
            base_url="https://example.com/v1",
        )

    def test_openai_compatible_requires_base_url(self) -> None:
        settings = Settings(openai_compatible_api_key="k")
        with pytest.raises(ValueError, match="openai_compatible_base_url"):
            ExtractorFactory.create(settings, "openai_compatible")

    def test_missing_api_key_raises(self) -> None:
        settings = Settings(gemini_api_key="")
        with pytest.raises(ValueError, match="Missing API key"):
            ExtractorFactory.create(settings, "gemini")

    def test_missing_model_name_raises(self) -> None:
        settings = Settings(openai_api_key="openai-key", openai_model_name="")
        with patch("assetlens.extraction.factory.OpenAIClientAdapter") as mock_adapter:
            with pytest.raises(ValueError, match="Missing model name"):
                ExtractorFactory.create(settings, "openai")
        mock_adapter.assert_not_called()

    def test_blank_compatible_model_name_raises(self) -> None:
        settings = Settings(
            openai_compatible_api_key="k",
            openai_compatible_model_name="  ",
            openai_compatible_base_url="https://example.com/v1",
        )
        with pytest.raises(ValueError, match="Missing model name"):
            ExtractorFactory.create(settings, "openai_compatible")

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown extraction provider"):
            ExtractorFactory.create(Settings(), "claude")

    def test_supported_providers(self) -> None:
        assert set(ExtractorFactory.supported_providers()) == {
            "example",
            "openai",
            "openai_compatible",
            "gemini",
            "glm",
        }


class TestExtractorRegistry:
    def test_caches_per_provider(self) -> None:
        registry = ExtractorRegistry(Settings())
        assert registry.get("example") is registry.get("EXAMPLE")

    def test_builds_lazily(self) -> None:
        with patch("assetlens.extraction.factory.ExtractorFactory.create") as mock_create:
            registry = ExtractorRegistry(Settings())
            mock_create.assert_not_called()
            registry.get("gemini")
        mock_create.assert_called_once()
