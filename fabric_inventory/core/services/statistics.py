"""
Derived inventory statistics.

Pure functions over item and movement collections. Day boundaries are
evaluated in local time, matching what the user sees on the dashboard.
"""

from collections.abc import Iterable
from datetime import datetime, timedelta

from fabric_inventory.core.entities.fabric import FabricItem
from fabric_inventory.core.entities.movement import Movement, MovementType
from fabric_inventory.core.entities.statistics import (
    InventoryStatistics,
    MovementSummary,
)


def to_local(moment: datetime) -> datetime:
    """Convert to an aware local datetime. Naive values are taken as local."""
    return moment.astimezone()


def is_same_local_day(moment: datetime, now: datetime) -> bool:
    return to_local(moment).date() == to_local(now).date()


def compute_statistics(
    items: Iterable[FabricItem],
    movements: Iterable[Movement],
    now: datetime,
) -> InventoryStatistics:
    """Compute dashboard statistics from the current collections."""
    items = list(items)
    return InventoryStatistics(
        total_items=len(items),
        total_value=sum(item.total_value for item in items),
        low_stock=sum(1 for item in items if item.is_low_stock),
        movements_today=sum(
            1 for mov in movements if is_same_local_day(mov.created_at, now)
        ),
    )


def summarize_movements(
    movements: Iterable[Movement],
    now: datetime,
    window_days: int = 7,
) -> MovementSummary:
    """Compute history-view totals.

    The rolling window starts exactly ``window_days`` before ``now``, not at
    a midnight boundary.
    """
    window_start = to_local(now) - timedelta(days=window_days)
    total_entries = 0.0
    total_exits = 0.0
    today = 0
    recent = 0

    for mov in movements:
        if mov.movement_type is MovementType.ENTRY:
            total_entries += mov.quantity
        else:
            total_exits += mov.quantity
        if is_same_local_day(mov.created_at, now):
            today += 1
        if to_local(mov.created_at) >= window_start:
            recent += 1

    return MovementSummary(
        total_entries=total_entries,
        total_exits=total_exits,
        movements_today=today,
        movements_last_7_days=recent,
    )
