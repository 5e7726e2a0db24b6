"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fabric_inventory.core.entities.fabric import DEFAULT_IMAGE


class StorageSettings(BaseSettings):
    """Local key-value storage configuration."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    backend: Literal["sqlite", "file", "memory"] = "sqlite"
    data_dir: Path = Path("data")
    db_name: str = "inventario.db"

    # Keys used by the browser build, kept so exported data loads unchanged
    items_key: str = "inventario-telas"
    movements_key: str = "inventario-movimientos"

    # SQLite settings
    busy_timeout: int = 30000  # ms

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_name

    @property
    def blobs_dir(self) -> Path:
        return self.data_dir / "blobs"


class InventorySettings(BaseSettings):
    """Inventory behaviour configuration."""

    model_config = SettingsConfigDict(env_prefix="INVENTORY_")

    default_image: str = DEFAULT_IMAGE
    recent_movements_limit: int = Field(default=5, ge=1)
    history_window_days: int = Field(default=7, ge=1)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Fabric Inventory"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    storage: StorageSettings = Field(default_factory=StorageSettings)
    inventory: InventorySettings = Field(default_factory=InventorySettings)


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
