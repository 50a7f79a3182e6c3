import pytest
from pydantic import ValidationError

from assetlens.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_db_port(self) -> None:
        s = Settings()
        assert s.db_port == 5432

    def test_default_extraction_provider(self) -> None:
        s = Settings()
        assert s.extraction_provider == "gemini"

    def test_default_queue_timing(self) -> None:
        s = Settings()
        assert s.queue_pacing_delay_ms == 2000
        assert s.queue_backoff_base_ms == 2500
        assert s.queue_max_retries == 3

    def test_default_queue_limit(self) -> None:
        s = Settings()
        assert s.queue_max_files == 50

    def test_default_allowed_extensions(self) -> None:
        s = Settings()
        assert s.allowed_extensions == [".html", ".htm", ".mhtml", ".pdf"]

    def test_default_page_size(self) -> None:
        s = Settings()
        assert s.default_page_size == 10

    def test_persistence_disabled_by_default(self) -> None:
        s = Settings()
        assert s.persistence_enabled is False


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXTRACTION_PROVIDER", "glm")
        s = Settings()
        assert s.extraction_provider == "glm"

    def test_loads_max_retries(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QUEUE_MAX_RETRIES", "5")
        s = Settings()
        assert s.queue_max_retries == 5

    def test_loads_extensions_as_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ALLOWED_EXTENSIONS", '["html"]')
        s = Settings()
        assert s.allowed_extensions == [".html"]


class TestSettingsValidation:
    def test_invalid_db_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_page_size_outside_options_raises(self) -> None:
        with pytest.raises(ValidationError):
            Settings(default_page_size=20)

    def test_extensions_are_normalized(self) -> None:
        s = Settings(allowed_extensions=["PDF", ".HTML"])
        assert s.allowed_extensions == [".pdf", ".html"]
