"""Tests for fabric entities."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from fabric_inventory.core.entities.fabric import (
    IMMUTABLE_FIELDS,
    MUTABLE_FIELDS,
    FabricDraft,
    FabricItem,
)

CREATED = datetime(2024, 5, 1, 10, 0, tzinfo=UTC)


class TestFabricDraft:
    """Tests for FabricDraft."""

    def test_defaults(self):
        draft = FabricDraft()
        assert draft.name == ""
        assert draft.quantity == 0.0
        assert draft.image is None
        assert draft.notes is None

    def test_populate_by_alias(self):
        draft = FabricDraft.model_validate(
            {"nombre": "Lino", "tipo": "Plano", "cantidad": 12, "proveedor": "Telas SA"}
        )
        assert draft.name == "Lino"
        assert draft.type == "Plano"
        assert draft.quantity == 12.0
        assert draft.supplier == "Telas SA"


class TestFabricItem:
    """Tests for FabricItem."""

    def test_total_value(self):
        item = FabricItem(id="1", quantity=100, price_per_metre=5, created_at=CREATED)
        assert item.total_value == 500.0

    def test_low_stock_at_threshold(self):
        item = FabricItem(id="1", quantity=10, min_stock=10, created_at=CREATED)
        assert item.is_low_stock

    def test_not_low_stock_above_threshold(self):
        item = FabricItem(id="1", quantity=10.5, min_stock=10, created_at=CREATED)
        assert not item.is_low_stock

    @pytest.mark.parametrize("query", ["algodón", "ALGODÓN", "premium", "plano", "blanco"])
    def test_matches(self, query):
        item = FabricItem(
            id="1",
            name="Algodón Premium",
            type="Plano",
            color="Blanco",
            material="100% Algodón",
            created_at=CREATED,
        )
        assert item.matches(query)

    def test_matches_ignores_supplier(self):
        item = FabricItem(id="1", name="Lino", supplier="Algodonera", created_at=CREATED)
        assert not item.matches("algodonera")

    def test_frozen(self):
        item = FabricItem(id="1", created_at=CREATED)
        with pytest.raises(ValidationError):
            item.quantity = 5

    def test_requires_id_and_timestamp(self):
        with pytest.raises(ValidationError):
            FabricItem(name="Lino")

    def test_parses_browser_timestamp(self):
        item = FabricItem.model_validate(
            {"id": "1718000000000", "nombre": "Lino", "fechaIngreso": "2024-06-10T06:13:20.000Z"}
        )
        assert item.created_at == datetime(2024, 6, 10, 6, 13, 20, tzinfo=UTC)

    def test_dumps_browser_keys(self):
        item = FabricItem(id="1", name="Lino", price_per_metre=3, created_at=CREATED)
        data = item.model_dump(by_alias=True, mode="json")
        assert data["nombre"] == "Lino"
        assert data["precioMetro"] == 3.0
        assert "fechaIngreso" in data


class TestFieldSets:
    """Tests for the mutable/immutable field sets."""

    def test_partition(self):
        assert MUTABLE_FIELDS | IMMUTABLE_FIELDS == set(FabricItem.model_fields)
        assert not MUTABLE_FIELDS & IMMUTABLE_FIELDS
