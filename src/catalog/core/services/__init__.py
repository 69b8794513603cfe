"""Core services exports."""

# Product lookup cache
from .cache import ProductCache, ProductCacheInMemory

# Database Service
from .database.db_session import DbSessionService

# Product Service
from .product import ProductService

__all__ = [
    "ProductCache",
    "ProductCacheInMemory",
    "DbSessionService",
    "ProductService",
]
