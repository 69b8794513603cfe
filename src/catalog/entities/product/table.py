"""Product database table model."""

from src.catalog.entities._base import EntityTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    This represents how the Product entity is stored in the database.
    It's separate from the domain entity so the ORM session never leaks
    into the cache or the API layer.
    """

    __tablename__ = "product"

    name: str | None = None
    stock: int = 0
