"""
Production FastAPI Application
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from event_ticketing.platform.app_factory import create_app
from event_ticketing.platform.config.di import cleanup, container, setup
from event_ticketing.platform.config.wire_modules import WIRE_MODULES
from event_ticketing.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from event_ticketing.platform.logging.loguru_io import Logger
from event_ticketing.platform.state.redis_client import redis_client


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Event Ticketing] Starting up...')

    setup()
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Event Ticketing] Dependency injection wired')

    await create_db_and_tables()
    Logger.base.info('🗄️  [Event Ticketing] Database tables ready')

    # Optional: notifications fall back to memory without Redis
    await redis_client.initialize()

    Logger.base.info('✅ [Event Ticketing] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Event Ticketing] Shutting down...')

    await redis_client.disconnect()
    await dispose_engine()
    Logger.base.info('🗄️  [Event Ticketing] Database engine disposed')

    container.unwire()
    cleanup()

    Logger.base.info('👋 [Event Ticketing] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
