"""Abstract interfaces for local persistence."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from fabric_inventory.core.entities.fabric import FabricItem
from fabric_inventory.core.entities.movement import Movement


class IKeyValueStorage(ABC):
    """Durable string-keyed text storage, the local-storage equivalent."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Get the text stored under key, or None if absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any prior contents."""
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """Remove key. Removing a missing key is a no-op."""
        pass

    def close(self) -> None:
        """Release any underlying resources."""
        return None


class IInventoryPersistence(ABC):
    """Interface for loading and saving the item and movement collections."""

    @abstractmethod
    def load(self) -> tuple[list[FabricItem], list[Movement]]:
        """Load both collections.

        A missing or unreadable collection loads as empty; this never fails.
        """
        pass

    @abstractmethod
    def save_items(self, items: Sequence[FabricItem]) -> None:
        """Replace the persisted item collection."""
        pass

    @abstractmethod
    def save_movements(self, movements: Sequence[Movement]) -> None:
        """Replace the persisted movement ledger."""
        pass

    def close(self) -> None:
        """Release the underlying storage."""
        return None
