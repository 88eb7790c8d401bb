"""Base service class for domain services."""

import asyncio
from typing import Awaitable, TypeVar

import logfire
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from agora.domain.error import PersistenceError

T = TypeVar("T")

DEFAULT_OPERATION_TIMEOUT = 5.0


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    operation_timeout: float = DEFAULT_OPERATION_TIMEOUT

    async def _bounded(self, awaitable: Awaitable[T]) -> T:
        """Await a persistence call under the operation timeout.

        IntegrityError is re-raised untouched so the caller can turn it into
        a domain outcome. Timeouts and every other store failure become
        PersistenceError.

        Args:
            awaitable: Repository call to await

        Returns:
            Whatever the repository call returns

        Raises:
            PersistenceError: On timeout or store failure
        """
        try:
            return await asyncio.wait_for(awaitable, timeout=self.operation_timeout)
        except IntegrityError:
            raise
        except asyncio.TimeoutError:
            logfire.error(
                "Persistence call timed out",
                service=type(self).__name__,
                timeout=self.operation_timeout,
            )
            raise PersistenceError(
                f"Persistence call timed out after {self.operation_timeout}s"
            )
        except SQLAlchemyError as e:
            logfire.error(
                "Persistence call failed",
                service=type(self).__name__,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise PersistenceError("Persistence call failed") from e
