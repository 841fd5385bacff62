"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here. See shop_admin.core.lifespan and
shop_admin.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from shop_admin.api.v1 import api_router
from shop_admin.core.config import get_settings
from shop_admin.core.exception_handlers import register_exception_handlers
from shop_admin.core.lifespan import create_lifespan
from shop_admin.core.limiter import limiter
from shop_admin.middleware import RequestIDMiddleware, TimeoutMiddleware


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app)

    # First added = innermost. Order (outer to inner): timeout, request ID, CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(TimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)

    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()
