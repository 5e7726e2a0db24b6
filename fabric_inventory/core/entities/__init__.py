"""Core domain entities."""

from fabric_inventory.core.entities.fabric import DEFAULT_IMAGE, FabricDraft, FabricItem
from fabric_inventory.core.entities.movement import (
    ENTRY_REASONS,
    EXIT_REASONS,
    Movement,
    MovementFilter,
    MovementType,
)
from fabric_inventory.core.entities.statistics import (
    InventoryStatistics,
    MovementSummary,
)

__all__ = [
    # Fabric entities
    "DEFAULT_IMAGE",
    "FabricDraft",
    "FabricItem",
    # Movement entities
    "Movement",
    "MovementType",
    "MovementFilter",
    "ENTRY_REASONS",
    "EXIT_REASONS",
    # Derived
    "InventoryStatistics",
    "MovementSummary",
]
