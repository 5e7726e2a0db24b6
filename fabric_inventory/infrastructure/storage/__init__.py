"""Local storage implementations."""

from fabric_inventory.infrastructure.storage.key_value import (
    FileKeyValueStorage,
    InMemoryKeyValueStorage,
    SQLiteKeyValueStorage,
)
from fabric_inventory.infrastructure.storage.persistence import (
    DEFAULT_ITEMS_KEY,
    DEFAULT_MOVEMENTS_KEY,
    SCHEMA_VERSION,
    KeyValueInventoryPersistence,
    decode_blob,
    encode_blob,
)

__all__ = [
    # Key-value backends
    "InMemoryKeyValueStorage",
    "SQLiteKeyValueStorage",
    "FileKeyValueStorage",
    # Persistence adapter
    "KeyValueInventoryPersistence",
    "SCHEMA_VERSION",
    "DEFAULT_ITEMS_KEY",
    "DEFAULT_MOVEMENTS_KEY",
    "encode_blob",
    "decode_blob",
]
