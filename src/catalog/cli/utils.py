"""Shared utilities for CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console

from src.catalog.core.services import (
    DbSessionService,
    ProductCacheInMemory,
    ProductService,
)
from src.catalog.entities.product import ProductRepository
from src.catalog.runtime.context import get_config

# Initialize Rich console for colored output
console = Console()


@contextmanager
def product_service_scope() -> Iterator[ProductService]:
    """Yield a ProductService wired to the configured database.

    The CLI is a single short-lived process, so it gets its own cache.
    """
    config = get_config()
    database_service = DbSessionService(config)
    try:
        if config.database.create_tables:
            database_service.create_all()
        with database_service.session_scope() as session:
            yield ProductService(
                ProductRepository(session),
                ProductCacheInMemory(
                    default_ttl=config.cache.ttl_seconds,
                    maxsize=config.cache.max_size,
                ),
                ttl_seconds=config.cache.ttl_seconds,
                invalidate_on_write=config.cache.invalidate_on_write,
            )
    finally:
        database_service.dispose()
