"""Tests for ProductService and its read-through cache policy."""

from unittest.mock import Mock

import pytest

from src.catalog.core.services import ProductCacheInMemory, ProductService
from src.catalog.entities.product import Product, ProductRepository
from tests.fixtures.core import FakeClock


class TestProductServiceCachePolicy:
    """Cache behaviour of get_by_id, observed through mocks."""

    @pytest.fixture
    def spy_cache(self, product_cache: ProductCacheInMemory) -> Mock:
        return Mock(wraps=product_cache)

    @pytest.fixture
    def service(self, mock_product_repository: Mock, spy_cache: Mock) -> ProductService:
        return ProductService(mock_product_repository, spy_cache, ttl_seconds=300)

    def test_miss_fetches_once_and_caches_once(
        self, service: ProductService, mock_product_repository: Mock, spy_cache: Mock
    ):
        product = Product(id=1, name="Widget", stock=10)
        mock_product_repository.get.return_value = product

        result = service.get_by_id(1)

        assert result == product
        mock_product_repository.get.assert_called_once_with(1)
        spy_cache.set.assert_called_once_with(1, product, ttl=300)

    def test_hit_skips_repository(
        self, service: ProductService, mock_product_repository: Mock
    ):
        mock_product_repository.get.return_value = Product(id=1, name="Widget")

        service.get_by_id(1)
        service.get_by_id(1)
        service.get_by_id(1)

        mock_product_repository.get.assert_called_once_with(1)

    def test_not_found_is_not_cached(
        self, service: ProductService, mock_product_repository: Mock, spy_cache: Mock
    ):
        mock_product_repository.get.return_value = None

        assert service.get_by_id(7) is None
        assert service.get_by_id(7) is None

        assert mock_product_repository.get.call_count == 2
        spy_cache.set.assert_not_called()

    def test_expired_entry_refetches(
        self,
        service: ProductService,
        mock_product_repository: Mock,
        spy_cache: Mock,
        clock: FakeClock,
    ):
        mock_product_repository.get.return_value = Product(id=1, name="Widget")

        service.get_by_id(1)
        clock.advance(301)
        service.get_by_id(1)

        assert mock_product_repository.get.call_count == 2
        assert spy_cache.set.call_count == 2

    def test_cache_observations_are_logged(
        self,
        service: ProductService,
        mock_product_repository: Mock,
        log_messages: list[str],
    ):
        mock_product_repository.get.side_effect = [Product(id=1, name="Widget"), None]

        service.get_by_id(1)
        service.get_by_id(1)
        service.get_by_id(2)

        assert "Product with ID 1 fetched from repository." in log_messages
        assert "Product with ID 1 fetched from cache." in log_messages
        assert "Product with ID 2 not found." in log_messages

    def test_writes_do_not_touch_cache(
        self, service: ProductService, mock_product_repository: Mock, spy_cache: Mock
    ):
        product = Product(id=1, name="Widget", stock=1)
        mock_product_repository.create.return_value = product
        mock_product_repository.update.return_value = product

        service.add(Product(name="Widget", stock=1))
        service.update(product)
        service.delete(1)

        mock_product_repository.delete.assert_called_once_with(1)
        spy_cache.set.assert_not_called()
        spy_cache.invalidate.assert_not_called()

    def test_get_all_delegates(
        self, service: ProductService, mock_product_repository: Mock, spy_cache: Mock
    ):
        products = [Product(id=1, name="Widget"), Product(id=2, name="Gadget")]
        mock_product_repository.list_all.return_value = products

        assert service.get_all() == products
        spy_cache.get.assert_not_called()

    def test_invalidate_on_write(
        self, mock_product_repository: Mock, spy_cache: Mock
    ):
        service = ProductService(
            mock_product_repository, spy_cache, invalidate_on_write=True
        )

        service.update(Product(id=1, name="Widget"))
        service.delete(2)

        assert [c.args for c in spy_cache.invalidate.call_args_list] == [(1,), (2,)]

    def test_repository_errors_propagate(
        self, service: ProductService, mock_product_repository: Mock
    ):
        mock_product_repository.list_all.side_effect = RuntimeError("connection refused")

        with pytest.raises(RuntimeError, match="connection refused"):
            service.get_all()


class TestProductServiceWithDatabase:
    """End-to-end service behaviour over a real repository."""

    def test_add_then_get_all(self, product_service: ProductService):
        created = product_service.add(Product(name="Widget", stock=10))

        assert created.id is not None and created.id > 0
        assert created in product_service.get_all()

    def test_add_does_not_populate_cache(
        self, product_service: ProductService, product_cache: ProductCacheInMemory
    ):
        created = product_service.add(Product(name="Widget", stock=10))

        assert product_cache.get(created.id) is None

    def test_stale_read_until_ttl_expires(
        self, product_service: ProductService, clock: FakeClock
    ):
        """Updates leave the cached copy in place until it expires."""
        created = product_service.add(Product(name="Widget", stock=10))
        assert product_service.get_by_id(created.id).stock == 10

        product_service.update(Product(id=created.id, name="Widget", stock=3))

        clock.advance(299)
        assert product_service.get_by_id(created.id).stock == 10

        clock.advance(2)
        assert product_service.get_by_id(created.id).stock == 3

    def test_deleted_product_served_from_cache_until_expiry(
        self, product_service: ProductService, clock: FakeClock
    ):
        created = product_service.add(Product(name="Widget", stock=10))
        product_service.get_by_id(created.id)

        product_service.delete(created.id)

        assert product_service.get_by_id(created.id) is not None
        clock.advance(300)
        assert product_service.get_by_id(created.id) is None

    def test_fresh_read_with_invalidate_on_write(
        self,
        product_repository: ProductRepository,
        product_cache: ProductCacheInMemory,
    ):
        service = ProductService(
            product_repository, product_cache, invalidate_on_write=True
        )
        created = service.add(Product(name="Widget", stock=10))
        service.get_by_id(created.id)

        service.update(Product(id=created.id, name="Widget", stock=3))

        assert service.get_by_id(created.id).stock == 3

    def test_delete_nonexistent_is_noop(self, product_service: ProductService):
        product_service.delete(12345)

        assert product_service.get_all() == []
