"""
Service factory functions for dependency injection.

This module wires infrastructure implementations to the inventory store.
Consumers should build a store with ``open_inventory_store`` and pass it
along explicitly; ``get_inventory_store`` exists for entry points that
cannot.
"""

from fabric_inventory.config import (
    Settings,
    bind_store_context,
    clear_store_context,
    get_logger,
    get_settings,
)
from fabric_inventory.core.exceptions import ConfigurationError
from fabric_inventory.core.interfaces.storage import IKeyValueStorage
from fabric_inventory.core.services.inventory_store import InventoryStore
from fabric_inventory.infrastructure.storage import (
    FileKeyValueStorage,
    InMemoryKeyValueStorage,
    KeyValueInventoryPersistence,
    SQLiteKeyValueStorage,
)

logger = get_logger(__name__)

# Process-wide store instance
_inventory_store: InventoryStore | None = None


def create_key_value_storage(settings: Settings | None = None) -> IKeyValueStorage:
    """Build the key-value backend selected by ``STORAGE_BACKEND``."""
    storage_settings = (settings or get_settings()).storage
    backend = storage_settings.backend

    if backend == "sqlite":
        return SQLiteKeyValueStorage(
            db_path=storage_settings.db_path,
            busy_timeout=storage_settings.busy_timeout,
        )
    if backend == "file":
        return FileKeyValueStorage(storage_settings.blobs_dir)
    if backend == "memory":
        return InMemoryKeyValueStorage()

    raise ConfigurationError(
        f"Unknown storage backend: {backend}",
        code="UNKNOWN_STORAGE_BACKEND",
        details={"backend": backend},
    )


def open_inventory_store(
    settings: Settings | None = None,
    storage: IKeyValueStorage | None = None,
) -> InventoryStore:
    """
    Create an InventoryStore loaded from local storage.

    Args:
        settings: Optional settings override
        storage: Optional key-value backend override

    Returns:
        Open InventoryStore; the caller owns it and must close it
    """
    settings = settings or get_settings()
    persistence = KeyValueInventoryPersistence(
        storage or create_key_value_storage(settings),
        items_key=settings.storage.items_key,
        movements_key=settings.storage.movements_key,
    )
    bind_store_context(persistence.items_key, persistence.movements_key)
    return InventoryStore.open(
        persistence,
        default_image=settings.inventory.default_image,
        recent_movements_limit=settings.inventory.recent_movements_limit,
        history_window_days=settings.inventory.history_window_days,
    )


def get_inventory_store() -> InventoryStore:
    """Get or create the process-wide InventoryStore."""
    global _inventory_store
    if _inventory_store is None:
        _inventory_store = open_inventory_store()
        logger.info("inventory_store_initialized")
    return _inventory_store


def close_inventory_store() -> None:
    """Flush and close the process-wide InventoryStore."""
    global _inventory_store
    if _inventory_store is not None:
        store, _inventory_store = _inventory_store, None
        store.close()
        clear_store_context()
