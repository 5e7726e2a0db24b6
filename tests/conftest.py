"""Pytest configuration and fixtures."""

import itertools
from collections.abc import Generator
from datetime import datetime, timedelta

import pytest

from fabric_inventory.config import reset_settings
from fabric_inventory.core.services.inventory_store import InventoryStore
from fabric_inventory.infrastructure.storage import (
    InMemoryKeyValueStorage,
    KeyValueInventoryPersistence,
)


class FixedClock:
    """Controllable clock returning aware local datetimes."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture(autouse=True)
def clean_settings() -> Generator[None, None, None]:
    """Make every test start from freshly loaded settings."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def clock() -> FixedClock:
    """Mid-day local time, so small offsets stay on the same calendar day."""
    return FixedClock(datetime(2024, 5, 15, 12, 0).astimezone())


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def memory_storage() -> InMemoryKeyValueStorage:
    return InMemoryKeyValueStorage()


@pytest.fixture
def persistence(memory_storage: InMemoryKeyValueStorage) -> KeyValueInventoryPersistence:
    return KeyValueInventoryPersistence(memory_storage)


@pytest.fixture
def store(persistence, clock, id_factory) -> InventoryStore:
    return InventoryStore.open(persistence, clock=clock, id_factory=id_factory)


@pytest.fixture
def denim_draft() -> dict:
    return {
        "name": "Denim",
        "type": "Denim",
        "color": "Blue",
        "material": "Cotton",
        "quantity": 100,
        "price_per_metre": 5,
        "min_stock": 10,
        "supplier": "Textiles del Norte",
    }
