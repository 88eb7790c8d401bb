"""Bearer tokens: HS256 JWTs signed with the configured secret.

Claims:
    sub       user ID (string, as the JWT spec requires)
    username  username at the time of login
    iat, exp  issue and expiry times
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from agora.config import AuthSettings

REQUIRED_CLAIMS = ["sub", "iat", "exp"]


class JWTError(Exception):
    """Token is malformed, badly signed or expired."""


class TokenPayload(BaseModel):
    """Decoded token claims."""

    user_id: int
    username: str
    issued_at: datetime
    expires_at: datetime


def create_token(
    user_id: int,
    username: str,
    settings: AuthSettings,
    now: datetime | None = None,
) -> str:
    """Sign a token for ``user_id`` that expires after ``jwt_expiry_days``."""
    issued_at = now or datetime.now(timezone.utc)
    claims = {
        "sub": str(user_id),
        "username": username,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check signature and expiry and return the claims.

    Raises:
        JWTError: If the token is expired, badly signed or missing claims
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload(
            user_id=claims["sub"],
            username=claims.get("username", ""),
            issued_at=claims["iat"],
            expires_at=claims["exp"],
        )
    except PydanticValidationError:
        # Signed by us, but not with the claims we issue
        raise JWTError("Malformed token payload")
