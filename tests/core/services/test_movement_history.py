"""Tests for movement history filtering."""

from datetime import datetime, timedelta

import pytest

from fabric_inventory.core.entities.fabric import FabricItem
from fabric_inventory.core.entities.movement import Movement, MovementFilter, MovementType
from fabric_inventory.core.services.movement_history import (
    ITEM_NOT_FOUND,
    filter_history,
    newest_first,
    resolve_item_name,
)

BASE = datetime(2024, 5, 1, 10, 0).astimezone()


@pytest.fixture
def items_by_id():
    return {
        "denim": FabricItem(id="denim", name="Denim Azul", created_at=BASE),
        "seda": FabricItem(id="seda", name="Seda Roja", created_at=BASE),
    }


@pytest.fixture
def movements():
    return [
        Movement(id="1", item_id="denim", movement_type=MovementType.ENTRY,
                 quantity=10, created_at=BASE),
        Movement(id="2", item_id="seda", movement_type=MovementType.EXIT,
                 quantity=2, created_at=BASE + timedelta(days=1)),
        Movement(id="3", item_id="gone", movement_type=MovementType.EXIT,
                 quantity=1, created_at=BASE + timedelta(days=2)),
        Movement(id="4", item_id="denim", movement_type=MovementType.EXIT,
                 quantity=4, created_at=BASE + timedelta(days=1)),
    ]


class TestFilterHistory:
    """Tests for filter_history."""

    def test_no_criteria_sorts_newest_first(self, movements, items_by_id):
        result = filter_history(movements, items_by_id)
        assert [mov.id for mov in result] == ["3", "4", "2", "1"]

    def test_by_type(self, movements, items_by_id):
        result = filter_history(
            movements, items_by_id, MovementFilter(movement_type=MovementType.ENTRY)
        )
        assert [mov.id for mov in result] == ["1"]

    def test_by_date_prefix(self, movements, items_by_id):
        day = (BASE + timedelta(days=1)).date().isoformat()
        result = filter_history(movements, items_by_id, MovementFilter(date=day))
        assert [mov.id for mov in result] == ["4", "2"]

    def test_by_month_prefix(self, movements, items_by_id):
        result = filter_history(movements, items_by_id, MovementFilter(date="2024-05"))
        assert len(result) == 4

    def test_by_item_name_case_insensitive(self, movements, items_by_id):
        result = filter_history(movements, items_by_id, MovementFilter(item_name="denim"))
        assert [mov.id for mov in result] == ["4", "1"]

    def test_dangling_never_matches_name(self, movements, items_by_id):
        result = filter_history(
            movements, items_by_id, MovementFilter(item_name=ITEM_NOT_FOUND)
        )
        assert result == []

    def test_combined_criteria(self, movements, items_by_id):
        criteria = MovementFilter(movement_type=MovementType.EXIT, item_name="seda")
        result = filter_history(movements, items_by_id, criteria)
        assert [mov.id for mov in result] == ["2"]


class TestHelpers:
    """Tests for ordering and name resolution."""

    def test_newest_first_ties_prefer_later_recorded(self, movements):
        assert [mov.id for mov in newest_first(movements[1:2] + movements[3:])] == ["4", "2"]

    def test_resolve_item_name(self, movements, items_by_id):
        assert resolve_item_name(movements[0], items_by_id) == "Denim Azul"
        assert resolve_item_name(movements[2], items_by_id) == ITEM_NOT_FOUND
