"""Domain layer errors.

NotFoundError, ForbiddenError and InvalidEdgeError are terminal: the
operation is rejected with no side effect. ConflictError signals a
uniqueness violation lost in a race and is retried by the ledger services
before it can reach a caller.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a referenced account, content item or row is absent."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Raised when an actor has no rights over the target row."""

    def __init__(self, resource: str, resource_id: str, actor_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.actor_id = actor_id
        super().__init__(
            f"Account {actor_id} is not allowed to modify {resource} {resource_id}"
        )


class InvalidEdgeError(DomainError):
    """Raised for a self-follow or a malformed engagement target."""

    def __init__(self, message: str):
        super().__init__(message)


class ConflictError(DomainError):
    """Raised by repositories when a unique key is already taken."""

    def __init__(self, resource: str, key: str):
        self.resource = resource
        self.key = key
        super().__init__(f"Duplicate {resource}: {key}")
