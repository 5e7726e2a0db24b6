"""Stock movement domain entities."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MovementType(str, Enum):
    """Direction of a stock movement."""

    ENTRY = "entrada"
    EXIT = "salida"


# Standard reason codes offered by the entry and exit forms
ENTRY_REASONS: tuple[str, ...] = (
    "COMPRA NUEVA",
    "DEVOLUCIÓN DE CLIENTE",
    "AJUSTE DE INVENTARIO",
    "TRANSFERENCIA",
    "REPARACIÓN DE STOCK",
    "OTRO",
)

EXIT_REASONS: tuple[str, ...] = (
    "VENTA A CLIENTE",
    "USO EN PRODUCCIÓN",
    "MUESTRA A CLIENTE",
    "DEFECTO ENCONTRADO",
    "TRANSFERENCIA",
    "DEVOLUCIÓN A PROVEEDOR",
    "OTRO",
)


class Movement(BaseModel):
    """Records a single entry or exit against one fabric item."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    item_id: str = Field(alias="telaId")  # weak reference, may dangle
    movement_type: MovementType = Field(alias="tipo")
    quantity: float = Field(alias="cantidad", gt=0)
    created_at: datetime = Field(alias="fecha")
    reason: str = Field(default="", alias="motivo")
    responsible: str = Field(default="", alias="responsable")
    notes: str | None = Field(default=None, alias="observaciones")
    unit_price: float | None = Field(default=None, alias="precioUnitario")

    @property
    def is_entry(self) -> bool:
        return self.movement_type is MovementType.ENTRY

    @property
    def signed_quantity(self) -> float:
        """Quantity with the sign of its effect on stock."""
        return self.quantity if self.is_entry else -self.quantity


class MovementFilter(BaseModel):
    """Criteria for browsing the movement history.

    ``date`` is matched as a prefix of the ISO timestamp, so ``"2024-05"``
    selects a month and ``"2024-05-01"`` a single day.
    """

    movement_type: MovementType | None = None
    date: str | None = None
    item_name: str | None = None
