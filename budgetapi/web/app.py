"""FastAPI application for the Personal Budget API.

create_app() builds the application around a single PriceStore. The store
is constructed once per application and shared by every request through
``app.state``.
"""

from __future__ import annotations

from uuid import uuid4

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from budgetapi import __version__
from budgetapi.config import AppConfig, get_config
from budgetapi.core.logging import configure_logging
from budgetapi.exceptions import PriceAPIError
from budgetapi.store import PriceStore
from budgetapi.web.routes import health, prices

logger = structlog.get_logger()


# Request Logging Middleware
class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        structlog.contextvars.clear_contextvars()

        request_id = request.headers.get("X-Request-ID", str(uuid4()))
        structlog.contextvars.bind_contextvars(request_id=request_id)

        logger.info(
            "request_started",
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error("request_failed", error=str(exc))
            raise

        logger.info("request_completed", status_code=response.status_code)
        response.headers["X-Request-ID"] = request_id
        return response


# Exception Handlers
async def price_api_error_handler(request: Request, exc: PriceAPIError):
    """Render price API errors as ``{"error": message}``."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render framework errors (unknown route, wrong method) in the same shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def create_app(config: AppConfig | None = None, store: PriceStore | None = None) -> FastAPI:
    """Build the application.

    Args:
        config: Application configuration (default: loaded from environment)
        store: Price store to serve (default: a fresh store with the seed prices)
    """
    config = config or get_config()
    configure_logging(config.log_level, config.json_logs)

    app = FastAPI(
        title=config.api_title,
        description="Create, read, update and delete food prices.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.store = store if store is not None else PriceStore.seeded()
    app.state.config = config

    app.add_middleware(RequestLoggingMiddleware)
    # Added last so it wraps everything, error responses included
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors.allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    app.add_exception_handler(PriceAPIError, price_api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Include Routers
    app.include_router(prices.router)
    app.include_router(health.router)

    # Prometheus Metrics
    if config.enable_metrics:
        Instrumentator().instrument(app).expose(app)

    return app
