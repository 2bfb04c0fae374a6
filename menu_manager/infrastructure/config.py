"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    service_name: str = "menu-manager"
    api_version: str = "0.1.0"
    debug: bool = False

    # Persistence
    database_url: str = "sqlite:///./data/menu_manager.db"
    storage_namespace: str = "higher-path-menu-manager"
    persistence_enabled: bool = True
    persist_pending_changes: bool = False

    # Publishing
    publish_log_limit: int = 50
    default_publisher: str = "admin"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "MENU_MANAGER_",
        "extra": "ignore",
    }


settings = Settings()
