"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Storage configuration."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    data_dir: Path = Path("data")
    db_name: str = "estoque.db"

    # SQLite settings
    pool_size: int = 5
    busy_timeout: int = 30000  # ms

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_name


class APISettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    cors_origins: list[str] = ["*"]

    # Identity supplied by the upstream auth provider
    user_header: str = "X-User-Id"
    require_user: bool = True


class InventorySettings(BaseSettings):
    """Inventory rules and presentation configuration."""

    model_config = SettingsConfigDict(env_prefix="INVENTORY_")

    locale: Literal["pt-BR", "en"] = "pt-BR"
    currency_symbol: str = "R$"
    restaurant_name: str = "Restaurante"

    # Movement limits
    max_quantity: float = 999999.99
    waste_reason_min_length: int = 5
    reason_max_length: int = 500

    # Reporting
    chart_months: int = 6
    stats_window_days: int = 30
    default_waste_safe_threshold: float = 100.0
    default_waste_critical_threshold: float = 300.0

    # Clients poll for unread notifications
    notification_poll_seconds: int = 30

    @model_validator(mode="after")
    def check_thresholds(self) -> "InventorySettings":
        if self.default_waste_safe_threshold >= self.default_waste_critical_threshold:
            raise ValueError("default waste safe threshold must be below the critical one")
        return self


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Estoque Restaurante"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    storage: StorageSettings = Field(default_factory=StorageSettings)
    api: APISettings = Field(default_factory=APISettings)
    inventory: InventorySettings = Field(default_factory=InventorySettings)

    @field_validator("storage", mode="before")
    @classmethod
    def ensure_data_dir(cls, v: Any) -> StorageSettings:
        if isinstance(v, dict):
            settings = StorageSettings(**v)
        else:
            settings = v or StorageSettings()
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        return settings


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
