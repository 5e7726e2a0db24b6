"""Movement history browsing: filtering, ordering and item-name resolution."""

from collections.abc import Iterable, Mapping

from fabric_inventory.core.entities.fabric import FabricItem
from fabric_inventory.core.entities.movement import Movement, MovementFilter
from fabric_inventory.core.services.statistics import to_local

# Shown in place of the name of a deleted item
ITEM_NOT_FOUND = "item not found"


def resolve_item_name(movement: Movement, items_by_id: Mapping[str, FabricItem]) -> str:
    """Name of the movement's item, or ITEM_NOT_FOUND for dangling references."""
    item = items_by_id.get(movement.item_id)
    return item.name if item is not None else ITEM_NOT_FOUND


def newest_first(movements: Iterable[Movement]) -> list[Movement]:
    """Sort by timestamp descending; ties keep the later-recorded one first."""
    return sorted(
        reversed(list(movements)),
        key=lambda mov: to_local(mov.created_at),
        reverse=True,
    )


def _matches(
    movement: Movement,
    criteria: MovementFilter,
    items_by_id: Mapping[str, FabricItem],
) -> bool:
    if criteria.movement_type is not None and movement.movement_type != criteria.movement_type:
        return False
    if criteria.date and not to_local(movement.created_at).isoformat().startswith(
        criteria.date
    ):
        return False
    if criteria.item_name:
        item = items_by_id.get(movement.item_id)
        if item is None:
            return False
        return criteria.item_name.lower() in item.name.lower()
    return True


def filter_history(
    movements: Iterable[Movement],
    items_by_id: Mapping[str, FabricItem],
    criteria: MovementFilter | None = None,
) -> list[Movement]:
    """Return movements matching criteria, newest first."""
    criteria = criteria or MovementFilter()
    selected = [mov for mov in movements if _matches(mov, criteria, items_by_id)]
    return newest_first(selected)
