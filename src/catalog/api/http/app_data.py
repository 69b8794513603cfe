from dataclasses import dataclass

from src.catalog.core.services import (
    DbSessionService,
    ProductCache,
    ProductCacheInMemory,
)
from src.catalog.runtime.config.config_data import ConfigData


@dataclass
class ApplicationDependencies:
    config: ConfigData
    database_service: DbSessionService
    product_cache: ProductCache


def build_dependencies(config: ConfigData) -> ApplicationDependencies:
    """Composition root: construct every application-wide component once."""
    database_service = DbSessionService(config)
    product_cache = ProductCacheInMemory(
        default_ttl=config.cache.ttl_seconds,
        maxsize=config.cache.max_size,
    )
    return ApplicationDependencies(
        config=config,
        database_service=database_service,
        product_cache=product_cache,
    )
