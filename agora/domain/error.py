"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (malformed or semantically invalid input)."""

    pass


class AuthenticationError(DomainError):
    """Raised when the caller cannot be identified or credentials don't match."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: int, user_id: int):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: int | str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a unique field or edge already exists."""

    pass


class PersistenceError(DomainError):
    """Raised when the store fails, times out, or a write cannot be applied."""

    pass
