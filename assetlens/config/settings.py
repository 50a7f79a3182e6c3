from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "assetlens"
    db_username: str = "assetlens"
    db_password: str = "secret"

    persistence_enabled: bool = False
    user_id: str = ""

    extraction_provider: str = "gemini"
    extraction_temperature: float = 0.1

    gemini_api_key: str = ""
    gemini_model_name: str = "gemini-2.5-flash"
    gemini_timeout_seconds: int = 60

    glm_api_key: str = ""
    glm_model_name: str = "glm-4.5-flash"
    glm_timeout_seconds: int = 60

    openai_api_key: str = ""
    openai_model_name: str = ""
    openai_timeout_seconds: int = 30

    openai_compatible_api_key: str = ""
    openai_compatible_model_name: str = ""
    openai_compatible_base_url: str = ""
    openai_compatible_timeout_seconds: int = 30

    queue_pacing_delay_ms: int = 2000
    queue_backoff_base_ms: int = 2500
    queue_max_retries: int = 3
    queue_max_files: int = 50
    allowed_extensions: list[str] = [".html", ".htm", ".mhtml", ".pdf"]
    worker_poll_interval_seconds: int = 1

    pdf_engine: str = "pdfplumber"

    default_page_size: int = 10

    inbox_dir: str = "./inbox"
    export_dir: str = "./exports"
    export_basename: str = "assets"
    export_formats: list[str] = ["csv", "xlsx", "json"]

    @field_validator("default_page_size")
    @classmethod
    def _check_page_size(cls, value: int) -> int:
        if value not in (10, 25, 50, 100):
            raise ValueError("default_page_size must be one of 10, 25, 50, 100")
        return value

    @field_validator("allowed_extensions")
    @classmethod
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in value]
