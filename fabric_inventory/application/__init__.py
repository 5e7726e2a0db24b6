"""Application layer: store wiring and exports for consumers."""

from fabric_inventory.application.exports import (
    CSV_HEADER,
    export_filename,
    export_movements_csv,
)
from fabric_inventory.application.services import (
    close_inventory_store,
    create_key_value_storage,
    get_inventory_store,
    open_inventory_store,
)

__all__ = [
    "open_inventory_store",
    "get_inventory_store",
    "close_inventory_store",
    "create_key_value_storage",
    "export_movements_csv",
    "export_filename",
    "CSV_HEADER",
]
