from .product_cache import DEFAULT_TTL_SECONDS, ProductCache, ProductCacheInMemory

__all__ = ["DEFAULT_TTL_SECONDS", "ProductCache", "ProductCacheInMemory"]
