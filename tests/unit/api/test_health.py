"""Tests for the health endpoints."""

from unittest.mock import Mock

import pytest
from fastapi import Request
from fastapi.testclient import TestClient
from starlette.responses import JSONResponse

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.api.http.routers.health import readiness
from src.catalog.core.services import DbSessionService, ProductCacheInMemory
from src.catalog.entities.product import Product


class TestHealthEndpoints:
    def test_liveness(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "catalog-api"}

    def test_readiness(self, client: TestClient, product_cache: ProductCacheInMemory):
        product_cache.set(1, Product(id=1, name="Widget"))

        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert body["checks"]["database"] == {"status": "healthy", "type": "sqlite"}
        assert body["checks"]["cache"]["entries"] == 1
        assert body["checks"]["cache"]["ttl_seconds"] == 300

    def test_security_and_correlation_headers(self, client: TestClient):
        response = client.get("/health")

        assert response.headers["x-content-type-options"] == "nosniff"
        assert response.headers["x-frame-options"] == "DENY"
        assert "strict-transport-security" not in response.headers
        assert response.headers["x-request-id"]

    def test_docs_available_outside_production(self, client: TestClient):
        assert client.get("/docs").status_code == 200


class TestReadinessHandler:
    @pytest.mark.asyncio
    async def test_database_down_returns_503(self, test_config, product_cache):
        database_service = Mock(spec=DbSessionService)
        database_service.health_check.return_value = False
        request = Mock(spec=Request)
        request.app.state.app_dependencies = ApplicationDependencies(
            config=test_config,
            database_service=database_service,
            product_cache=product_cache,
        )

        response = await readiness(request)

        assert isinstance(response, JSONResponse)
        assert response.status_code == 503
