"""Caller identification for authenticated routes."""

from fastapi import HTTPException, status

from agora.domain.service import JWTService
from agora.domain.value import UserId
from agora.util.jwt import JWTError

BEARER_PREFIX = "Bearer "


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


def bearer_token(authorization: str | None) -> str:
    """Token from an ``Authorization: Bearer <token>`` header.

    Raises:
        HTTPException: 401 if the header is missing or not a bearer token
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise _unauthorized("Authentication required")

    token = authorization.removeprefix(BEARER_PREFIX).strip()
    if not token:
        raise _unauthorized("Authentication required")
    return token


def require_user_id(jwt_service: JWTService, authorization: str | None) -> UserId:
    """Identify the caller from their bearer token.

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    try:
        return jwt_service.user_id_for(bearer_token(authorization))
    except JWTError as e:
        raise _unauthorized(str(e))
