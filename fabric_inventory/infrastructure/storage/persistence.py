"""
Persistence adapter: the item collection and movement ledger as two
JSON blobs in key-value storage.

Blob format (version 1):

    {"version": 1, "records": [...]}

A bare JSON list is the un-versioned format written by the browser build and
loads as version 0. Records use the browser build's field names
(``nombre``, ``cantidad``, ``telaId``, ...).
"""

import json
import sqlite3
from collections.abc import Sequence
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from fabric_inventory.config import get_logger
from fabric_inventory.core.entities.fabric import FabricItem
from fabric_inventory.core.entities.movement import Movement
from fabric_inventory.core.exceptions import PersistenceError
from fabric_inventory.core.interfaces.storage import (
    IInventoryPersistence,
    IKeyValueStorage,
)

logger = get_logger(__name__)

SCHEMA_VERSION = 1

DEFAULT_ITEMS_KEY = "inventario-telas"
DEFAULT_MOVEMENTS_KEY = "inventario-movimientos"

ModelT = TypeVar("ModelT", bound=BaseModel)

_items_adapter = TypeAdapter(list[FabricItem])
_movements_adapter = TypeAdapter(list[Movement])


def encode_blob(adapter: TypeAdapter, records: Sequence[BaseModel]) -> str:
    """Serialize records into a versioned JSON envelope."""
    payload = {
        "version": SCHEMA_VERSION,
        "records": adapter.dump_python(list(records), mode="json", by_alias=True),
    }
    return json.dumps(payload, ensure_ascii=False)


def _extract_records(key: str, raw: str) -> list[Any]:
    """Return the raw record list from a blob, or [] if it is unreadable."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("blob_unparsable", key=key, error=str(e))
        return []

    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get("records"), list):
        version = data.get("version")
        if not isinstance(version, int) or version > SCHEMA_VERSION:
            logger.warning("blob_version_unsupported", key=key, version=version)
            return []
        return data["records"]

    logger.warning("blob_shape_unexpected", key=key, type=type(data).__name__)
    return []


def decode_blob(key: str, raw: str | None, model: type[ModelT]) -> list[ModelT]:
    """Parse a blob into models. Invalid records are skipped, never fatal."""
    if not raw:
        return []

    records: list[ModelT] = []
    for position, record in enumerate(_extract_records(key, raw)):
        try:
            records.append(model.model_validate(record))
        except PydanticValidationError as e:
            logger.warning(
                "record_skipped",
                key=key,
                position=position,
                errors=e.error_count(),
            )
    return records


class KeyValueInventoryPersistence(IInventoryPersistence):
    """Stores items and movements under two fixed keys."""

    def __init__(
        self,
        storage: IKeyValueStorage,
        items_key: str = DEFAULT_ITEMS_KEY,
        movements_key: str = DEFAULT_MOVEMENTS_KEY,
    ):
        self.storage = storage
        self.items_key = items_key
        self.movements_key = movements_key

    def load(self) -> tuple[list[FabricItem], list[Movement]]:
        items = decode_blob(self.items_key, self._read(self.items_key), FabricItem)
        movements = decode_blob(
            self.movements_key, self._read(self.movements_key), Movement
        )
        logger.info("inventory_loaded", items=len(items), movements=len(movements))
        return items, movements

    def save_items(self, items: Sequence[FabricItem]) -> None:
        self._write(self.items_key, encode_blob(_items_adapter, items))

    def save_movements(self, movements: Sequence[Movement]) -> None:
        self._write(self.movements_key, encode_blob(_movements_adapter, movements))

    def close(self) -> None:
        self.storage.close()

    def _read(self, key: str) -> str | None:
        try:
            return self.storage.get(key)
        except (sqlite3.Error, OSError, UnicodeDecodeError) as e:
            logger.warning("blob_read_failed", key=key, error=str(e))
            return None

    def _write(self, key: str, blob: str) -> None:
        try:
            self.storage.set(key, blob)
        except (sqlite3.Error, OSError) as e:
            logger.error("persistence_flush_failed", key=key, error=str(e))
            raise PersistenceError(key, str(e)) from e
