from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8000

    storage_root: Path = Path("public")
    public_base_url: str = ""

    max_upload_bytes: int = 20 * 1024 * 1024
    accepted_mime_types: frozenset[str] = frozenset(
        {"image/png", "image/jpeg", "image/jpg"}
    )
    error_detail_max_chars: int = 300

    removal_strategy: str = "remote_service"
    removal_endpoint: str = "http://localhost:7000/remove-background"
    removal_api_key: str = ""
    removal_timeout_seconds: int = 30
    removal_prompt_path: Path | None = None

    openai_api_key: str = ""
    openai_model_name: str = "gpt-image-1"
    openai_base_url: str = ""
    openai_timeout_seconds: int = 60
