"""Entity: Product."""

from typing import Any

from pydantic import ConfigDict, Field

from src.catalog.entities._base import Entity


class Product(Entity):
    """Product entity representing an item in the catalog.

    This is the domain model exchanged between the API, the service layer and
    the lookup cache. Neither field carries validation constraints.
    """

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"id": 1, "name": "Widget", "stock": 10}]}
    )

    name: str | None = Field(default=None, description="Product name")
    stock: int = Field(default=0, description="Quantity on hand")

    def __eq__(self, other: Any) -> bool:
        """Compare products by id and business attributes."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.stock == other.stock
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.stock))
