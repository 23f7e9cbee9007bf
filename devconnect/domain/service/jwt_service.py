"""JWT token domain service."""

import logfire

from devconnect.config import AuthSettings
from devconnect.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, account_id: str, handle: str) -> str:
        """Create JWT token for an account.

        Args:
            account_id: Account ID
            handle: Account handle

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", account_id=account_id):
            return create_token(account_id, handle, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            return verify_token(token, self.auth_settings)

    def get_account_id_from_token(self, token: str | None) -> str | None:
        """Extract the account ID from a token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Account ID if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_token(token).account_id
        except Exception as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
