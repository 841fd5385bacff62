"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring (logging, telemetry, DB engine
dispose). No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from shop_admin.core.config import get_settings
from shop_admin.infrastructure.persistence import database
from shop_admin.shared.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
    setup_logging,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, telemetry (if enabled) with FastAPI, logging and
    SQLAlchemy instrumentation. Shutdown: telemetry flush, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging(settings)

    if settings.telemetry_enabled:
        telemetry = TelemetryConfig.from_settings(settings)
        if telemetry.setup_telemetry() is not None:
            telemetry.instrument_app(app, database.get_engine())
            set_telemetry(telemetry)

    yield

    # ---- Shutdown ----
    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
        logger.info("Telemetry shutdown complete")

    if database.engine is not None:
        await database.engine.dispose()
        logger.info("Database engine disposed")
