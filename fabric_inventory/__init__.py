"""Fabric inventory: stock items, entry/exit movements and statistics."""

from fabric_inventory.core.entities import (
    FabricDraft,
    FabricItem,
    InventoryStatistics,
    Movement,
    MovementFilter,
    MovementSummary,
    MovementType,
)
from fabric_inventory.core.services import InventoryStore

__version__ = "1.0.0"

__all__ = [
    "InventoryStore",
    "FabricDraft",
    "FabricItem",
    "Movement",
    "MovementType",
    "MovementFilter",
    "InventoryStatistics",
    "MovementSummary",
]
