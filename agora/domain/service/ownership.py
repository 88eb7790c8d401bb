"""Ownership guard applied before mutating user-owned content."""

import logfire

from agora.domain.error import NotAuthorizedError
from agora.domain.value import UserId


def assert_owner(
    resource: str, resource_id: int, author_id: UserId, caller_id: UserId
) -> None:
    """Fail unless the caller owns the resource.

    Args:
        resource: Resource kind used in the error message ("post", "comment", ...)
        resource_id: ID of the resource being modified
        author_id: Owner recorded on the resource
        caller_id: Authenticated caller

    Raises:
        NotAuthorizedError: If ``author_id`` and ``caller_id`` differ
    """
    if author_id != caller_id:
        logfire.warn(
            "Ownership check failed",
            resource=resource,
            resource_id=resource_id,
            author_id=author_id,
            caller_id=caller_id,
        )
        raise NotAuthorizedError(resource, resource_id, caller_id)
