"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from devconnect.config import Settings
from devconnect.domain.service import DeliveryPool
from devconnect.interface.api.errors import register_exception_handlers
from devconnect.interface.api.routes import (
    accounts,
    events,
    health,
    marks,
    notifications,
    preferences,
    views,
    votes,
)
from devconnect.util.di.container import create_container, setup_di
from devconnect.util.error import ConfigurationError
from devconnect.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)

DEFAULT_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION"


@asynccontextmanager
async def lifespan(app_instance: FastAPI) -> AsyncIterator[None]:
    """Drain pending digest deliveries and close the container on shutdown."""
    yield
    container: AsyncContainer = app_instance.state.dishka_container
    delivery_pool = await container.get(DeliveryPool)
    if delivery_pool.in_flight:
        logfire.info("Draining digest deliveries", in_flight=delivery_pool.in_flight)
    await delivery_pool.drain()
    await container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use instead of the production one

    Raises:
        ConfigurationError: If production runs with the default JWT secret, or
            a deployed environment leaves the event hooks without a service token
    """
    settings = Settings()

    if (
        settings.environment == "production"
        and settings.auth.jwt_secret == DEFAULT_JWT_SECRET
    ):
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")

    # Unauthenticated /events hooks are only acceptable on a developer machine
    if (
        settings.environment in ("staging", "production")
        and settings.auth.service_token is None
    ):
        raise ConfigurationError(
            f"AUTH__SERVICE_TOKEN must be set in {settings.environment}"
        )

    # Traces outbound digest webhooks
    instrument_httpx()

    app_instance = FastAPI(
        title="DevConnect Engagement API",
        description="Follows, likes, bookmarks, votes, views and notifications for DevConnect",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.frontend_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())
    register_exception_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(accounts.router)
    app_instance.include_router(marks.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(views.router)
    app_instance.include_router(notifications.router)
    app_instance.include_router(preferences.router)
    app_instance.include_router(events.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
