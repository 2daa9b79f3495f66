"""FastAPI application factory."""

from typing import Optional

from fastapi import FastAPI

from shrtn.service import ShortenerService
from .errors import register_error_handlers
from .web import web_router
from .middleware.headers import ForwardedHeadersMiddleware
from .middleware.logging import LoggingMiddleware


def create_app(
    config,
    service_instance: Optional[ShortenerService] = None,
    lifespan=None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        config: Configuration instance
        service_instance: Service the handlers use; when None, the lifespan
            hook is expected to set app.state.service at startup
        lifespan: Optional lifespan context manager

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Shrtn",
        description="Minimal URL shortening service",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    app.state.service = service_instance
    app.state.config = config

    register_error_handlers(app)

    # Last added runs first: forwarded headers are parsed before the request is logged
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ForwardedHeadersMiddleware)

    app.include_router(web_router, tags=["Web"])

    return app
