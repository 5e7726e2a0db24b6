"""Core interfaces (ports) for dependency injection."""

from fabric_inventory.core.interfaces.storage import (
    IInventoryPersistence,
    IKeyValueStorage,
)

__all__ = [
    "IKeyValueStorage",
    "IInventoryPersistence",
]
