"""
Shared FastAPI App Factory

Production (event_ticketing.main) and the test app differ only in their
lifespan; everything mounted on the app is built here.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from event_ticketing.platform.config.core_setting import settings
from event_ticketing.platform.constant.route_constant import (
    API_BASE,
    AUTH_BASE,
    BOOKING_BASE,
    EVENT_BASE,
    HEALTH,
)
from event_ticketing.platform.exception.exception_handlers import register_exception_handlers
from event_ticketing.service.ticketing.driving_adapter.http_controller.auth_controller import (
    router as auth_router,
)
from event_ticketing.service.ticketing.driving_adapter.http_controller.booking_controller import (
    router as booking_router,
)
from event_ticketing.service.ticketing.driving_adapter.http_controller.event_controller import (
    router as event_router,
)
from event_ticketing.service.ticketing.driving_adapter.http_controller.job_controller import (
    router as job_router,
)


# (router, prefix, openapi tag)
RESOURCE_ROUTERS: tuple[tuple[APIRouter, str, str], ...] = (
    (auth_router, AUTH_BASE, 'auth'),
    (event_router, EVENT_BASE, 'event'),
    (booking_router, BOOKING_BASE, 'booking'),
    (job_router, API_BASE, 'jobs'),
)

system_router = APIRouter(tags=['system'])


@system_router.get(HEALTH)
async def api_health() -> dict[str, str]:
    return {'status': 'OK', 'message': 'Event Booking API is running'}


@system_router.get('/health')
async def health_check() -> dict[str, str]:
    """Liveness probe for container orchestration."""
    return {'status': 'healthy', 'service': settings.PROJECT_NAME}


@system_router.get('/metrics')
async def get_metrics() -> PlainTextResponse:
    return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Event Booking API',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,  # type: ignore
            allow_origins=settings.BACKEND_CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=['*'],
            allow_headers=['*'],
        )

    register_exception_handlers(app)

    for router, prefix, tag in RESOURCE_ROUTERS:
        app.include_router(router, prefix=prefix, tags=[tag])
    app.include_router(system_router)

    return app
