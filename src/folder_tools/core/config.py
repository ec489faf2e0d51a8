"""Configuration management for folder-tools."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    otel_enabled: bool = False
    otel_service_name: str = "folder-tools"

    # Overrides for the well-known folders; platform defaults are used when unset
    downloads_dir: Optional[str] = None
    desktop_dir: Optional[str] = None
    documents_dir: Optional[str] = None

    model_config = {
        "env_prefix": "FOLDER_TOOLS_",
        "case_sensitive": False,
    }


settings = Settings()
