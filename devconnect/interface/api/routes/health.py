"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel

from devconnect.config import Settings
from devconnect.domain.service import DeliveryPool

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str
    environment: str
    deliveries_in_flight: int


class CORSDebugResponse(BaseModel):
    """CORS debugging information."""

    origin: str | None
    allowed_origins: list[str]
    cors_enabled: bool
    headers: dict[str, str]


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings], delivery_pool: FromDishka[DeliveryPool]
) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status, build information and the digest backlog
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version="0.1.0",
        git_sha=settings.git_sha,
        environment=settings.environment,
        deliveries_in_flight=delivery_pool.in_flight,
    )


@router.get("/health/cors", response_model=CORSDebugResponse)
async def cors_debug(
    request: Request, settings: FromDishka[Settings]
) -> CORSDebugResponse:
    """Debug CORS configuration.

    Returns:
        CORS configuration details and request headers
    """
    return CORSDebugResponse(
        origin=request.headers.get("origin"),
        allowed_origins=settings.frontend_origins,
        cors_enabled=True,
        headers=dict(request.headers),
    )
