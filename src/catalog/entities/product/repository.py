"""Product repository for data access operations."""

from loguru import logger
from sqlalchemy.orm.exc import StaleDataError
from sqlmodel import Session, select

from .entity import Product
from .table import ProductTable


class ProductRepository:
    """Data-access layer for products.

    Every mutating call commits immediately. A failed commit is rolled back
    and the store error is re-raised unchanged.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Product]:
        statement = select(ProductTable).order_by(ProductTable.id)
        rows = self._session.exec(statement).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def get(self, product_id: int) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.model_validate(row, from_attributes=True)

    def create(self, product: Product) -> Product:
        """Insert a new product; the store assigns its id."""
        row = ProductTable.model_validate(product.model_dump(exclude={"id"}))
        self._session.add(row)
        self._commit()
        self._session.refresh(row)
        logger.debug("Created product {}", row.id)
        return Product.model_validate(row, from_attributes=True)

    def update(self, product: Product) -> Product:
        """Replace the fields of the stored product sharing ``product.id``.

        Raises:
            StaleDataError: No stored product has that id. Updates never
                insert, so ids stay assigned by the store.
        """
        row = None
        if product.id is not None:
            row = self._session.get(ProductTable, product.id)
        if row is None:
            raise StaleDataError(f"Product {product.id} does not exist; nothing to update")
        row.sqlmodel_update(product.model_dump(exclude={"id"}))
        self._session.add(row)
        self._commit()
        self._session.refresh(row)
        logger.debug("Updated product {}", row.id)
        return Product.model_validate(row, from_attributes=True)

    def delete(self, product_id: int) -> None:
        """Remove the product if present; unknown ids are ignored."""
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return
        self._session.delete(row)
        self._commit()
        logger.debug("Deleted product {}", product_id)

    def _commit(self) -> None:
        try:
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
