"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.services import DbSessionService, ProductCache, ProductService
from src.catalog.entities.product import ProductRepository


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    """Get the application-wide dependencies built at startup."""
    return request.app.state.app_dependencies


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    return get_app_dependencies(request).database_service


def get_product_cache(request: Request) -> ProductCache:
    """Get the shared product lookup cache."""
    return get_app_dependencies(request).product_cache


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Open a database session for the duration of one request."""
    session = database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_product_repository(
    db: Session = Depends(get_db_session),
) -> ProductRepository:
    return ProductRepository(db)


def get_product_service(
    request: Request,
    repository: ProductRepository = Depends(get_product_repository),
    cache: ProductCache = Depends(get_product_cache),
) -> ProductService:
    """Get a Product service bound to this request's repository."""
    cache_config = get_app_dependencies(request).config.cache
    return ProductService(
        repository,
        cache,
        ttl_seconds=cache_config.ttl_seconds,
        invalidate_on_write=cache_config.invalidate_on_write,
    )
