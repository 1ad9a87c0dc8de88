"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (logging,
database tables, telemetry, engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from userapi.core.config import get_settings
from userapi.infrastructure.persistence import database
from userapi.shared.telemetry.logging import setup_logging
from userapi.shared.telemetry.telemetry import get_telemetry, set_telemetry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, database tables (if auto-create), SQLAlchemy
    instrumentation (when create_app set up telemetry). Shutdown order:
    telemetry shutdown, engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()

    if settings.database_auto_create:
        await database.init_models()

    telemetry = get_telemetry()
    if telemetry is not None:
        telemetry.instrument_sqlalchemy(database.get_engine())

    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    # ---- Shutdown ----
    if telemetry is not None:
        telemetry.shutdown()
        set_telemetry(None)

    await database.dispose_engine()
