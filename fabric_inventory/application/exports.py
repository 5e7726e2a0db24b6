"""CSV export of the movement history."""

import csv
import io
from datetime import date

from fabric_inventory.core.entities.movement import MovementFilter
from fabric_inventory.core.services.inventory_store import InventoryStore
from fabric_inventory.core.services.statistics import to_local

CSV_HEADER = [
    "Fecha",
    "Tela",
    "Tipo",
    "Cantidad",
    "Motivo",
    "Responsable",
    "Observaciones",
]


def _format_quantity(quantity: float) -> str:
    return str(int(quantity)) if quantity.is_integer() else str(quantity)


def export_movements_csv(
    store: InventoryStore,
    criteria: MovementFilter | None = None,
) -> str:
    """Render the filtered history, newest first, as CSV text.

    Dates are local ``DD/MM/YYYY HH:MM``; movements whose item was deleted
    show "item not found" as the fabric name.
    """
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for mov in store.movement_history(criteria):
        writer.writerow([
            to_local(mov.created_at).strftime("%d/%m/%Y %H:%M"),
            store.item_name_for(mov),
            mov.movement_type.value,
            _format_quantity(mov.quantity),
            mov.reason,
            mov.responsible,
            mov.notes or "",
        ])
    return output.getvalue()


def export_filename(today: date | None = None) -> str:
    return f"movimientos_{(today or date.today()).isoformat()}.csv"
