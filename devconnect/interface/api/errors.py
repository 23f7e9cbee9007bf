"""Exception handlers mapping layered errors onto HTTP responses."""

import logfire
import pydantic
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from devconnect.domain.error import (
    ConflictError,
    ForbiddenError,
    InvalidEdgeError,
    NotFoundError,
    ValidationError,
)
from devconnect.interface.error import AuthenticationError, ServiceTokenError


def _error(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


async def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return _error(status.HTTP_404_NOT_FOUND, str(exc))


async def _forbidden(request: Request, exc: ForbiddenError) -> JSONResponse:
    logfire.warn(
        "Forbidden request",
        path=request.url.path,
        resource=exc.resource,
        resource_id=exc.resource_id,
        actor_id=exc.actor_id,
    )
    return _error(status.HTTP_403_FORBIDDEN, str(exc))


async def _bad_request(request: Request, exc: Exception) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, str(exc))


async def _conflict(request: Request, exc: ConflictError) -> JSONResponse:
    logfire.warn("Conflict surfaced to caller", path=request.url.path, key=exc.key)
    return _error(status.HTTP_409_CONFLICT, str(exc))


async def _unauthenticated(request: Request, exc: AuthenticationError) -> JSONResponse:
    return _error(status.HTTP_401_UNAUTHORIZED, str(exc))


async def _bad_service_token(request: Request, exc: ServiceTokenError) -> JSONResponse:
    logfire.warn("Rejected collaborator hook", path=request.url.path)
    return _error(status.HTTP_401_UNAUTHORIZED, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers for domain and interface errors.

    NotFoundError maps to 404, ForbiddenError to 403, malformed input
    (InvalidEdgeError, ValidationError, bad identifiers) to 400 and a
    surfaced ConflictError to 409.
    """
    app.add_exception_handler(NotFoundError, _not_found)
    app.add_exception_handler(ForbiddenError, _forbidden)
    app.add_exception_handler(InvalidEdgeError, _bad_request)
    app.add_exception_handler(ValidationError, _bad_request)
    app.add_exception_handler(pydantic.ValidationError, _bad_request)
    app.add_exception_handler(ValueError, _bad_request)
    app.add_exception_handler(ConflictError, _conflict)
    app.add_exception_handler(AuthenticationError, _unauthenticated)
    app.add_exception_handler(ServiceTokenError, _bad_service_token)
