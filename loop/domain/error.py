"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Raised when an authenticated user lacks the capability for an action."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not allowed to {action} {resource} {resource_id}"
        )


class DepthLimitExceededError(DomainError):
    """Raised when branching from a loop that already sits at the depth ceiling."""

    def __init__(self, parent_id: str, parent_depth: int, max_depth: int):
        self.parent_id = parent_id
        self.parent_depth = parent_depth
        self.max_depth = max_depth
        super().__init__("Maximum branch depth reached")


class ConflictError(DomainError):
    """Raised when a write collides with existing state (unique constraint)."""

    pass


class AuthenticationError(DomainError):
    """Raised when a bearer token is missing, malformed or expired."""

    pass
