"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationError(InterfaceError):
    """Raised when a route needs a caller identity and has none."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Authentication required to {action}")


class ServiceTokenError(InterfaceError):
    """Raised when a collaborator hook presents a wrong service token."""

    pass
