"""Caller identity helpers shared by the routes."""

import hmac

from devconnect.config import AuthSettings
from devconnect.domain.service import JWTService
from devconnect.interface.error import AuthenticationError, ServiceTokenError


def require_account_id(
    jwt_service: JWTService, auth_token: str | None, action: str
) -> str:
    """Resolve the authenticated account from the ``auth_token`` cookie.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie
        action: What the caller tried to do, used in the error message

    Returns:
        Account ID of the caller

    Raises:
        AuthenticationError: If the cookie is missing or invalid
    """
    account_id = jwt_service.get_account_id_from_token(auth_token)
    if not account_id:
        raise AuthenticationError(action)
    return account_id


def verify_service_token(auth_settings: AuthSettings, token: str | None) -> None:
    """Check the shared secret presented by a collaborator service.

    Raises:
        ServiceTokenError: If a token is configured and the header does not match
    """
    expected = auth_settings.service_token
    if expected is None:
        return
    if token is None or not hmac.compare_digest(token, expected):
        raise ServiceTokenError("Invalid service token")
