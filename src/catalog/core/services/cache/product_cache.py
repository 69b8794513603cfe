import threading
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import NamedTuple

from cachetools import TLRUCache

from src.catalog.entities.product import Product

DEFAULT_TTL_SECONDS = 300.0


class ProductCache(ABC):
    @abstractmethod
    def get(self, product_id: int) -> Product | None:
        """
        Get a cached product.

        Args:
            product_id: The product identifier

        Returns:
            The cached product, or None on a miss or once its ttl has elapsed
        """
        raise NotImplementedError

    @abstractmethod
    def set(self, product_id: int, product: Product, ttl: float | None = None) -> None:
        """
        Cache a product, replacing any existing entry.

        Args:
            product_id: The product identifier
            product: The product to cache
            ttl: Seconds before the entry stops being served; the cache's
                default ttl when omitted
        """
        raise NotImplementedError

    @abstractmethod
    def invalidate(self, product_id: int) -> None:
        """Drop the entry for product_id if present."""
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        """Drop every entry."""
        raise NotImplementedError

    @abstractmethod
    def size(self) -> int:
        """Number of unexpired entries."""
        raise NotImplementedError


class _CacheEntry(NamedTuple):
    product: Product
    ttl: float


def _entry_expiry(_key: int, entry: _CacheEntry, now: float) -> float:
    return now + entry.ttl


class ProductCacheInMemory(ProductCache):
    """Process-wide product cache with a per-entry time-to-live.

    Expired entries are evicted lazily. The lock only protects the cache's
    internal bookkeeping; callers doing get-then-set may still race, in
    which case the last writer's entry wins.
    """

    def __init__(
        self,
        default_ttl: float = DEFAULT_TTL_SECONDS,
        maxsize: int = 1024,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        if default_ttl <= 0:
            raise ValueError("default_ttl must be positive")
        self._default_ttl = default_ttl
        self._cache: TLRUCache[int, _CacheEntry] = TLRUCache(
            maxsize=maxsize, ttu=_entry_expiry, timer=timer
        )
        self._lock = threading.RLock()

    @property
    def default_ttl(self) -> float:
        return self._default_ttl

    @property
    def maxsize(self) -> int:
        return int(self._cache.maxsize)

    def get(self, product_id: int) -> Product | None:
        with self._lock:
            entry = self._cache.get(product_id)
        return entry.product if entry is not None else None

    def set(self, product_id: int, product: Product, ttl: float | None = None) -> None:
        entry = _CacheEntry(product, self._default_ttl if ttl is None else ttl)
        with self._lock:
            self._cache[product_id] = entry

    def invalidate(self, product_id: int) -> None:
        with self._lock:
            self._cache.pop(product_id, None)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def size(self) -> int:
        with self._lock:
            self._cache.expire()
            return len(self._cache)
