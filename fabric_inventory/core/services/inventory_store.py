"""
Inventory store: the authoritative in-memory state of the fabric inventory.

Owns the item collection and the movement ledger, enforces that stock never
goes negative and that every movement is recorded against an existing item,
and flushes every committed mutation to the persistence adapter.
"""

import math
import uuid
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from types import TracebackType
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from fabric_inventory.config import get_logger
from fabric_inventory.core.entities.fabric import (
    DEFAULT_IMAGE,
    IMMUTABLE_FIELDS,
    MUTABLE_FIELDS,
    FabricDraft,
    FabricItem,
)
from fabric_inventory.core.entities.movement import (
    Movement,
    MovementFilter,
    MovementType,
)
from fabric_inventory.core.entities.statistics import (
    InventoryStatistics,
    MovementSummary,
)
from fabric_inventory.core.exceptions import (
    InsufficientStockError,
    InvalidQuantityError,
    ItemNotFoundError,
    PersistenceError,
    ValidationError,
)
from fabric_inventory.core.interfaces.storage import IInventoryPersistence
from fabric_inventory.core.services.movement_history import (
    filter_history,
    newest_first,
    resolve_item_name,
)
from fabric_inventory.core.services.statistics import (
    compute_statistics,
    summarize_movements,
)

logger = get_logger(__name__)

Subscriber = Callable[["InventoryStore"], None]

# Persisted aliases (nombre, cantidad, ...) accepted as update keys
_FIELD_ALIASES = {
    field.alias: name
    for name, field in FabricItem.model_fields.items()
    if field.alias
}


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _new_id() -> str:
    return uuid.uuid4().hex


def _is_positive_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value) and value > 0


def _invalid(error: PydanticValidationError) -> ValidationError:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or "draft"
    return ValidationError(field, first.get("msg", str(error)), first.get("input"))


class InventoryStore:
    """
    In-memory fabric inventory with immediate persistence.

    Construct with ``InventoryStore.open(persistence)`` to load saved state,
    and ``close()`` it (or use it as a context manager) to flush at the end of
    the session. Readers get immutable snapshots; writers go through the
    mutating operations, which validate before touching any state.

    Usage:
        with InventoryStore.open(persistence) as store:
            item_id = store.add_item({"name": "Denim", "quantity": 100})
            store.record_exit(item_id, 20, "VENTA A CLIENTE", "Ana")
    """

    def __init__(
        self,
        persistence: IInventoryPersistence,
        items: list[FabricItem] | None = None,
        movements: list[Movement] | None = None,
        *,
        clock: Callable[[], datetime] | None = None,
        id_factory: Callable[[], str] | None = None,
        default_image: str = DEFAULT_IMAGE,
        recent_movements_limit: int = 5,
        history_window_days: int = 7,
    ):
        self._persistence = persistence
        self._items: list[FabricItem] = list(items or [])
        self._movements: list[Movement] = list(movements or [])
        self._clock = clock or _utcnow
        self._new_id = id_factory or _new_id
        self._default_image = default_image
        self._recent_movements_limit = recent_movements_limit
        self._history_window_days = history_window_days
        self._subscribers: list[Subscriber] = []
        self._closed = False

        # Repair stored quantities that would break the stock invariant
        self._items = [self._floor_quantity(item) for item in self._items]

    @classmethod
    def open(cls, persistence: IInventoryPersistence, **kwargs: Any) -> "InventoryStore":
        """Load saved state and return a ready store."""
        items, movements = persistence.load()
        logger.info(
            "inventory_store_opened",
            items=len(items),
            movements=len(movements),
        )
        return cls(persistence, items, movements, **kwargs)

    def close(self) -> None:
        """Flush both collections, release storage and drop subscribers."""
        if self._closed:
            return
        self._closed = True
        self._subscribers.clear()
        try:
            self._flush(items=True, movements=True)
        finally:
            self._persistence.close()
            logger.info("inventory_store_closed")

    def __enter__(self) -> "InventoryStore":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Snapshots and subscriptions
    # ------------------------------------------------------------------

    @property
    def items(self) -> tuple[FabricItem, ...]:
        return tuple(self._items)

    @property
    def movements(self) -> tuple[Movement, ...]:
        return tuple(self._movements)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Call ``callback(store)`` after every committed mutation.

        Returns a function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # ------------------------------------------------------------------
    # Item operations
    # ------------------------------------------------------------------

    def add_item(self, draft: FabricDraft | Mapping[str, Any]) -> str:
        """Create an item from draft and return its new id.

        Incomplete drafts are accepted; required-field checks belong to the
        form that builds the draft.
        """
        if not isinstance(draft, FabricDraft):
            try:
                draft = FabricDraft.model_validate(draft)
            except PydanticValidationError as e:
                raise _invalid(e) from e

        fields = draft.model_dump()
        fields["image"] = draft.image or self._default_image
        item = self._floor_quantity(
            FabricItem(id=self._new_id(), created_at=self._clock(), **fields)
        )
        self._items.append(item)

        logger.info("item_added", item_id=item.id, name=item.name, quantity=item.quantity)
        self._commit(items=True)
        return item.id

    def update_item(self, item_id: str, changes: Mapping[str, Any]) -> FabricItem:
        """Merge changes into the item and return the updated item.

        ``id`` and ``created_at`` are never overwritten; unknown fields raise
        ValidationError.
        """
        index = self._index_of(item_id)
        normalized: dict[str, Any] = {}
        for key, value in changes.items():
            name = _FIELD_ALIASES.get(key, key)
            if name in IMMUTABLE_FIELDS:
                continue
            if name not in MUTABLE_FIELDS:
                raise ValidationError(key, "unknown item field", value)
            normalized[name] = value

        current = self._items[index]
        try:
            updated = FabricItem.model_validate({**current.model_dump(), **normalized})
        except PydanticValidationError as e:
            raise _invalid(e) from e

        updated = self._floor_quantity(updated)
        self._items[index] = updated

        logger.info("item_updated", item_id=item_id, fields=sorted(normalized))
        self._commit(items=True)
        return updated

    def delete_item(self, item_id: str) -> FabricItem:
        """Remove the item and return it. Its movements are kept."""
        index = self._index_of(item_id)
        removed = self._items.pop(index)

        logger.info("item_deleted", item_id=item_id)
        self._commit(items=True)
        return removed

    def get_item(self, item_id: str) -> FabricItem | None:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def require_item(self, item_id: str) -> FabricItem:
        return self._items[self._index_of(item_id)]

    def filter_items(self, query: str | None = None) -> tuple[FabricItem, ...]:
        """Items whose name, type, color or material contain query.

        Matching is case-insensitive; order is insertion order. An empty
        query returns every item.
        """
        if not query:
            return self.items
        return tuple(item for item in self._items if item.matches(query))

    def low_stock_items(self) -> tuple[FabricItem, ...]:
        return tuple(item for item in self._items if item.is_low_stock)

    def available_items(self) -> tuple[FabricItem, ...]:
        """Items with stock left to issue."""
        return tuple(item for item in self._items if item.quantity > 0)

    # ------------------------------------------------------------------
    # Movement operations
    # ------------------------------------------------------------------

    def record_entry(
        self,
        item_id: str,
        quantity: float,
        reason: str,
        responsible: str,
        notes: str | None = None,
        unit_price: float | None = None,
    ) -> str:
        """Add quantity to the item's stock. Returns the movement id."""
        return self.record_movement(
            item_id, MovementType.ENTRY, quantity, reason, responsible, notes, unit_price
        )

    def record_exit(
        self,
        item_id: str,
        quantity: float,
        reason: str,
        responsible: str,
        notes: str | None = None,
        unit_price: float | None = None,
    ) -> str:
        """Remove quantity from the item's stock. Returns the movement id."""
        return self.record_movement(
            item_id, MovementType.EXIT, quantity, reason, responsible, notes, unit_price
        )

    def record_movement(
        self,
        item_id: str,
        movement_type: MovementType,
        quantity: float,
        reason: str,
        responsible: str,
        notes: str | None = None,
        unit_price: float | None = None,
    ) -> str:
        """Validate, append the movement and apply it to the item's stock."""
        index = self._index_of(item_id)
        item = self._items[index]

        if not _is_positive_number(quantity):
            raise InvalidQuantityError(quantity)
        quantity = float(quantity)

        if movement_type is MovementType.EXIT and quantity > item.quantity:
            raise InsufficientStockError(
                item_id=item_id,
                requested=quantity,
                available=item.quantity,
            )

        try:
            movement = Movement(
                id=self._new_id(),
                item_id=item.id,
                movement_type=movement_type,
                quantity=quantity,
                created_at=self._clock(),
                reason=reason,
                responsible=responsible,
                notes=notes,
                unit_price=unit_price,
            )
        except PydanticValidationError as e:
            raise _invalid(e) from e
        new_quantity = max(0.0, item.quantity + movement.signed_quantity)

        self._movements.append(movement)
        self._items[index] = item.model_copy(update={"quantity": new_quantity})

        logger.info(
            "movement_recorded",
            movement_id=movement.id,
            item_id=item_id,
            type=movement_type.value,
            qty=quantity,
            remaining_qty=new_quantity,
        )
        self._commit(items=True, movements=True)
        return movement.id

    def recent_movements(self, limit: int | None = None) -> tuple[Movement, ...]:
        limit = self._recent_movements_limit if limit is None else limit
        return tuple(newest_first(self._movements)[:limit])

    def movement_history(self, criteria: MovementFilter | None = None) -> tuple[Movement, ...]:
        """Filtered movement history, newest first."""
        return tuple(filter_history(self._movements, self._items_by_id(), criteria))

    def item_name_for(self, movement: Movement) -> str:
        return resolve_item_name(movement, self._items_by_id())

    # ------------------------------------------------------------------
    # Derived statistics
    # ------------------------------------------------------------------

    def statistics(self) -> InventoryStatistics:
        return compute_statistics(self._items, self._movements, self._clock())

    def movement_summary(self) -> MovementSummary:
        return summarize_movements(
            self._movements, self._clock(), window_days=self._history_window_days
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _index_of(self, item_id: str) -> int:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        raise ItemNotFoundError(item_id)

    def _items_by_id(self) -> dict[str, FabricItem]:
        return {item.id: item for item in self._items}

    @staticmethod
    def _floor_quantity(item: FabricItem) -> FabricItem:
        if item.quantity >= 0:
            return item
        logger.warning("negative_quantity_floored", item_id=item.id, quantity=item.quantity)
        return item.model_copy(update={"quantity": 0.0})

    def _flush(self, items: bool = False, movements: bool = False) -> None:
        """Write the requested collections, attempting each even if one fails."""
        errors: list[PersistenceError] = []
        if items:
            try:
                self._persistence.save_items(self._items)
            except PersistenceError as e:
                errors.append(e)
        if movements:
            try:
                self._persistence.save_movements(self._movements)
            except PersistenceError as e:
                errors.append(e)
        if errors:
            raise errors[0]

    def _commit(self, items: bool = False, movements: bool = False) -> None:
        """Persist the mutation, then notify subscribers even if persisting failed."""
        try:
            self._flush(items=items, movements=movements)
        finally:
            self._notify()

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            try:
                callback(self)
            except Exception:
                logger.exception("subscriber_failed", subscriber=repr(callback))
