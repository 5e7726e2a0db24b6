"""Configuration module."""

from fabric_inventory.config.logging import (
    bind_store_context,
    clear_store_context,
    configure_logging,
    get_logger,
)
from fabric_inventory.config.settings import (
    InventorySettings,
    Settings,
    StorageSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "Settings",
    "StorageSettings",
    "InventorySettings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "get_logger",
    "bind_store_context",
    "clear_store_context",
]
