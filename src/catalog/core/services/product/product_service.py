"""Product service: CRUD orchestration with a read-through lookup cache."""

from loguru import logger

from src.catalog.core.services.cache import DEFAULT_TTL_SECONDS, ProductCache
from src.catalog.entities.product import Product, ProductRepository


class ProductService:
    """Coordinates the product repository and the shared lookup cache.

    Single-item reads consult the cache first and fall back to the
    repository. Writes go straight to the repository. Unless
    ``invalidate_on_write`` is set, updates and deletes leave any cached copy
    in place, so a stale product can be served until its ttl runs out.
    """

    def __init__(
        self,
        repository: ProductRepository,
        cache: ProductCache,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        invalidate_on_write: bool = False,
    ) -> None:
        self._repository = repository
        self._cache = cache
        self._ttl_seconds = ttl_seconds
        self._invalidate_on_write = invalidate_on_write

    def get_all(self) -> list[Product]:
        return self._repository.list_all()

    def get_by_id(self, product_id: int) -> Product | None:
        product = self._cache.get(product_id)
        if product is not None:
            logger.info("Product with ID {} fetched from cache.", product_id)
            return product

        product = self._repository.get(product_id)
        if product is None:
            logger.warning("Product with ID {} not found.", product_id)
            return None

        self._cache.set(product_id, product, ttl=self._ttl_seconds)
        logger.info("Product with ID {} fetched from repository.", product_id)
        return product

    def add(self, product: Product) -> Product:
        return self._repository.create(product)

    def update(self, product: Product) -> Product:
        updated = self._repository.update(product)
        if self._invalidate_on_write and product.id is not None:
            self._cache.invalidate(product.id)
        return updated

    def delete(self, product_id: int) -> None:
        self._repository.delete(product_id)
        if self._invalidate_on_write:
            self._cache.invalidate(product_id)
