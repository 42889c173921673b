"""
Production FastAPI Application

Serve with: granian --interface asgi src.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import (
    create_db_and_tables,
    dispose_engine,
    get_engine,
)
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Hotel Booking] Starting up...')

    tracing = TracingConfig(service_name='hotel-booking')
    tracing.setup()
    Logger.base.info('📊 [Hotel Booking] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Hotel Booking] Dependency injection wired')

    if settings.AUTO_CREATE_TABLES:
        await create_db_and_tables()
        Logger.base.info('🗄️  [Hotel Booking] Database tables ensured')

    tracing.instrument_sqlalchemy(engine=get_engine())
    Logger.base.info('🗄️  [Hotel Booking] Database engine ready + instrumented')

    Logger.base.info('✅ [Hotel Booking] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Hotel Booking] Shutting down...')

    await dispose_engine()
    Logger.base.info('🗄️  [Hotel Booking] Database engine disposed')

    # Flush remaining spans
    tracing.shutdown()

    container.unwire()

    Logger.base.info('👋 [Hotel Booking] Shutdown complete')


app = create_app(
    lifespan=lifespan,
    description='Hotel Booking System - room bookings and event tickets for enrolled users',
)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
