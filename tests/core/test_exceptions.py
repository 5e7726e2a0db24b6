"""Unit tests for domain exceptions."""

from fabric_inventory.core.exceptions import (
    ConfigurationError,
    FabricInventoryError,
    InsufficientStockError,
    InvalidQuantityError,
    InventoryError,
    ItemNotFoundError,
    PersistenceError,
    StorageError,
    ValidationError,
)


class TestFabricInventoryError:
    """Tests for base FabricInventoryError exception."""

    def test_basic_initialization(self):
        error = FabricInventoryError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.code == "FabricInventoryError"
        assert error.details == {}

    def test_with_custom_code(self):
        error = FabricInventoryError("Error message", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_to_dict(self):
        error = FabricInventoryError(
            "Test error",
            code="TEST_CODE",
            details={"extra": "info"},
        )
        assert error.to_dict() == {
            "error": "TEST_CODE",
            "message": "Test error",
            "details": {"extra": "info"},
        }


class TestInventoryErrors:
    """Tests for inventory-related exceptions."""

    def test_item_not_found_error(self):
        error = ItemNotFoundError(item_id="abc")
        assert isinstance(error, InventoryError)
        assert error.code == "ITEM_NOT_FOUND"
        assert "abc" in error.message
        assert error.details["item_id"] == "abc"

    def test_invalid_quantity_error(self):
        error = InvalidQuantityError(quantity=-2)
        assert error.code == "INVALID_QUANTITY"
        assert error.details["quantity"] == -2

    def test_insufficient_stock_error(self):
        error = InsufficientStockError(item_id="abc", requested=20, available=10)
        assert error.code == "INSUFFICIENT_STOCK"
        assert "requested 20" in error.message
        assert error.details == {"item_id": "abc", "requested": 20, "available": 10}


class TestStorageErrors:
    """Tests for storage-related exceptions."""

    def test_persistence_error(self):
        error = PersistenceError(key="inventario-telas", error="disk full")
        assert isinstance(error, StorageError)
        assert error.code == "PERSISTENCE_FAILURE"
        assert "inventario-telas" in error.message
        assert error.details == {"key": "inventario-telas", "error": "disk full"}


class TestOtherErrors:
    """Tests for validation and configuration exceptions."""

    def test_validation_error(self):
        error = ValidationError(field="weight", message="unknown item field", value=3)
        assert error.code == "VALIDATION_ERROR"
        assert error.details["field"] == "weight"
        assert error.details["value"] == "3"

    def test_configuration_error(self):
        error = ConfigurationError("bad backend")
        assert isinstance(error, FabricInventoryError)
        assert error.code == "ConfigurationError"
