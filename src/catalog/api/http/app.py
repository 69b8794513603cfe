"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from src.catalog.api.http.app_data import ApplicationDependencies, build_dependencies
from src.catalog.api.http.routers.health import router as health_router
from src.catalog.api.http.routers.products import router as products_router
from src.catalog.api.utils.app_startup import configure_logging
from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.context import get_config


# --- Security middleware ---
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, environment: str = "development"):
        super().__init__(app)
        self._environment = environment

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        # HSTS only in prod
        if self._environment == "production":
            response.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )
        return response


# --- Request logging middleware ---
async def log_requests(request: Request, call_next):
    # Correlation / tracing
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": request.client.host if request.client else "unknown",
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            # Store and connectivity failures end up here unhandled
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


def create_app(
    config: ConfigData | None = None,
    dependencies: ApplicationDependencies | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: Configuration to run with; the current context's when omitted.
        dependencies: Prebuilt application dependencies. When omitted they are
            constructed from ``config`` at startup.
    """
    main_config = config or (dependencies.config if dependencies else get_config())
    environment = main_config.app.environment

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await startup(app, main_config, dependencies)
        try:
            yield
        finally:
            await shutdown(app)

    app = FastAPI(
        title="Product Catalog API",
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None if environment == "production" else "/docs",
        redoc_url=None if environment == "production" else "/redoc",
    )

    # Registered first so it sits innermost and its 500 responses still pass
    # through the security and CORS middlewares
    app.middleware("http")(log_requests)

    app.add_middleware(SecurityHeadersMiddleware, environment=environment)

    # --- CORS configuration ---
    cors = main_config.app.cors
    if environment == "production" and "*" in cors.origins and cors.allow_credentials:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors.origins,
        allow_credentials=cors.allow_credentials,
        allow_methods=cors.allow_methods,
        allow_headers=cors.allow_headers,
    )

    # --- Router registration ---
    app.include_router(health_router)
    app.include_router(products_router)

    return app


# --- Lifecycle hooks ---
async def startup(
    app: FastAPI,
    config: ConfigData,
    dependencies: ApplicationDependencies | None = None,
) -> None:
    deps = dependencies or build_dependencies(config)
    if config.database.create_tables:
        deps.database_service.create_all()

    app.state.app_dependencies = deps
    logger.info(
        "Starting up application in {} environment (cache ttl {}s, invalidate on write: {})",
        config.app.environment,
        config.cache.ttl_seconds,
        config.cache.invalidate_on_write,
    )


async def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies = app.state.app_dependencies
    app_dependencies.product_cache.clear()
    app_dependencies.database_service.dispose()


configure_logging()
app = create_app()

__all__ = ["app", "create_app", "startup", "shutdown"]


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=get_config().app.host,
        port=get_config().app.port,
        log_config=None,
    )
