"""
Domain exceptions for the fabric inventory.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class FabricInventoryError(Exception):
    """Base exception for all fabric inventory errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for consumer-facing messages."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Inventory Exceptions
class InventoryError(FabricInventoryError):
    """Base exception for inventory operations."""

    pass


class ItemNotFoundError(InventoryError):
    """Fabric item not found in the collection."""

    def __init__(self, item_id: str):
        super().__init__(
            f"Item not found: {item_id}",
            code="ITEM_NOT_FOUND",
            details={"item_id": item_id},
        )


class InvalidQuantityError(InventoryError):
    """Movement quantity is not a positive number."""

    def __init__(self, quantity: Any):
        super().__init__(
            f"Quantity must be greater than zero, got {quantity}",
            code="INVALID_QUANTITY",
            details={"quantity": quantity},
        )


class InsufficientStockError(InventoryError):
    """Exit quantity exceeds the stock on hand."""

    def __init__(self, item_id: str, requested: float, available: float):
        super().__init__(
            f"Insufficient stock for item {item_id}: "
            f"requested {requested}, available {available}",
            code="INSUFFICIENT_STOCK",
            details={
                "item_id": item_id,
                "requested": requested,
                "available": available,
            },
        )


# Storage Exceptions
class StorageError(FabricInventoryError):
    """Base exception for storage operations."""

    pass


class PersistenceError(StorageError):
    """Writing state to local storage did not complete.

    The in-memory state is still correct for the running session but will
    not survive a reload.
    """

    def __init__(self, key: str, error: str):
        super().__init__(
            f"Failed to persist '{key}': {error}",
            code="PERSISTENCE_FAILURE",
            details={"key": key, "error": error},
        )


# Validation Exceptions
class ValidationError(FabricInventoryError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value else None,
            },
        )


class ConfigurationError(FabricInventoryError):
    """Configuration error."""

    pass
