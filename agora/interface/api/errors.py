"""Exception handlers mapping domain errors to HTTP responses.

Every error body has the shape ``{"detail": "<message>"}``.

    ValidationError / RequestValidationError -> 400
    ConflictError                            -> 400
    AuthenticationError / JWTError           -> 401
    NotAuthorizedError                       -> 403
    NotFoundError                            -> 404
    PersistenceError                         -> 500 (details logged only)
    Exception                                -> 500 (details logged only)

Every handled error marks the request transaction rollback-only, so a
failed request never commits the writes it made before failing.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from agora.domain.error import (
    AuthenticationError,
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from agora.persistence.database import RequestTransaction
from agora.util.jwt import JWTError


def _detail(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


async def _roll_back(request: Request) -> None:
    # Handled errors never reach the session provider; flag the transaction
    container = getattr(request.state, "dishka_container", None)
    if container is not None:
        transaction = await container.get(RequestTransaction)
        transaction.mark_rollback_only()


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{field}: {message}" if field else message


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers on the application."""

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        await _roll_back(request)
        message = _first_validation_message(exc)
        logfire.warn("Invalid request body", path=request.url.path, error=message)
        return _detail(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        await _roll_back(request)
        logfire.warn("Validation error", path=request.url.path, error=str(exc))
        return _detail(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        await _roll_back(request)
        logfire.warn("Conflict", path=request.url.path, error=str(exc))
        return _detail(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        await _roll_back(request)
        logfire.warn("Authentication failed", path=request.url.path)
        return _detail(status.HTTP_401_UNAUTHORIZED, str(exc))

    @app.exception_handler(JWTError)
    async def handle_jwt_error(request: Request, exc: JWTError):
        await _roll_back(request)
        logfire.warn("Invalid token", path=request.url.path, error=str(exc))
        return _detail(status.HTTP_401_UNAUTHORIZED, str(exc))

    @app.exception_handler(NotAuthorizedError)
    async def handle_not_authorized(request: Request, exc: NotAuthorizedError):
        await _roll_back(request)
        logfire.warn(
            "Forbidden",
            path=request.url.path,
            resource=exc.resource,
            resource_id=exc.resource_id,
            user_id=exc.user_id,
        )
        return _detail(
            status.HTTP_403_FORBIDDEN,
            f"You can only modify your own {exc.resource}",
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        await _roll_back(request)
        return _detail(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(PersistenceError)
    async def handle_persistence_error(request: Request, exc: PersistenceError):
        await _roll_back(request)
        logfire.error("Persistence failure", path=request.url.path, error=str(exc))
        return _detail(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "An internal error occurred"
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        # Runs outside the request container; the exception itself reached
        # the session provider and rolled the transaction back
        logfire.exception(
            "Unexpected error", path=request.url.path, error_type=type(exc).__name__
        )
        return _detail(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred"
        )
