"""Derived statistics, recomputed on every read and never persisted."""

from pydantic import BaseModel, ConfigDict, Field


class InventoryStatistics(BaseModel):
    """Dashboard aggregates over the current items and movements."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_items: int = Field(default=0, alias="totalTelas")
    total_value: float = Field(default=0.0, alias="valorTotal")
    low_stock: int = Field(default=0, alias="stockBajo")
    movements_today: int = Field(default=0, alias="movimientosHoy")


class MovementSummary(BaseModel):
    """History-view aggregates over the movement ledger."""

    model_config = ConfigDict(frozen=True)

    total_entries: float = 0.0  # metres
    total_exits: float = 0.0  # metres
    movements_today: int = 0
    movements_last_7_days: int = 0
