"""Core services: the inventory store and its pure helpers."""

from fabric_inventory.core.services.inventory_store import (
    DEFAULT_IMAGE,
    InventoryStore,
    Subscriber,
)
from fabric_inventory.core.services.movement_history import (
    ITEM_NOT_FOUND,
    filter_history,
    newest_first,
    resolve_item_name,
)
from fabric_inventory.core.services.statistics import (
    compute_statistics,
    is_same_local_day,
    summarize_movements,
)

__all__ = [
    "InventoryStore",
    "Subscriber",
    "DEFAULT_IMAGE",
    "ITEM_NOT_FOUND",
    "filter_history",
    "newest_first",
    "resolve_item_name",
    "compute_statistics",
    "summarize_movements",
    "is_same_local_day",
]
