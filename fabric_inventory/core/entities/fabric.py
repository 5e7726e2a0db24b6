"""Fabric item domain entities."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_IMAGE = "/images/no-disponible.png"


class FabricDraft(BaseModel):
    """Data for a new fabric item, before id and ingestion time are assigned.

    No field is required: forms validate before calling the store.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(default="", alias="nombre")
    type: str = Field(default="", alias="tipo")
    color: str = ""
    material: str = ""
    quantity: float = Field(default=0.0, alias="cantidad")  # metres
    price_per_metre: float = Field(default=0.0, alias="precioMetro")
    min_stock: float = Field(default=0.0, alias="stockMinimo")
    supplier: str = Field(default="", alias="proveedor")
    image: str | None = Field(default=None, alias="imagen")
    notes: str | None = Field(default=None, alias="observaciones")


class FabricItem(BaseModel):
    """One stocked fabric type with its quantity on hand."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str = Field(default="", alias="nombre")
    type: str = Field(default="", alias="tipo")
    color: str = ""
    material: str = ""
    quantity: float = Field(default=0.0, alias="cantidad")
    price_per_metre: float = Field(default=0.0, alias="precioMetro")
    min_stock: float = Field(default=0.0, alias="stockMinimo")
    supplier: str = Field(default="", alias="proveedor")
    image: str | None = Field(default=None, alias="imagen")
    notes: str | None = Field(default=None, alias="observaciones")
    created_at: datetime = Field(alias="fechaIngreso")

    @property
    def total_value(self) -> float:
        """Stock value = quantity * price_per_metre."""
        return self.quantity * self.price_per_metre

    @property
    def is_low_stock(self) -> bool:
        return self.quantity <= self.min_stock

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on name, type, color or material."""
        needle = query.lower()
        return any(
            needle in value.lower()
            for value in (self.name, self.type, self.color, self.material)
        )


# Fields a caller may change through update_item
MUTABLE_FIELDS = frozenset(FabricDraft.model_fields)

# Fields fixed at creation
IMMUTABLE_FIELDS = frozenset({"id", "created_at"})
