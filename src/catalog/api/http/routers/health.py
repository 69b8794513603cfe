"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from src.catalog.api.http.app_data import ApplicationDependencies

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(request: Request) -> dict[str, str]:
    """Basic health check endpoint - checks if app is running.

    This is a liveness probe that returns 200 OK as long as the application
    process is running. It does not check dependencies.
    """
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return {"status": "healthy", "service": app_deps.config.app.name}


@router.get("/ready", response_model=None)
async def readiness(request: Request) -> dict[str, Any] | JSONResponse:
    """Readiness check - validates the database and reports the cache.

    Returns 200 if the database answers, 503 otherwise.
    """
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    config = app_deps.config

    checks: dict[str, dict[str, Any]] = {}
    db_healthy = app_deps.database_service.health_check()
    checks["database"] = {
        "status": "healthy" if db_healthy else "unhealthy",
        "type": config.database.backend,
    }
    checks["cache"] = {
        "status": "healthy",
        "type": "in-memory",
        "entries": app_deps.product_cache.size(),
        "ttl_seconds": config.cache.ttl_seconds,
    }

    body = {"status": "ready" if db_healthy else "not_ready", "checks": checks}
    if not db_healthy:
        return JSONResponse(status_code=503, content=body)
    return body
