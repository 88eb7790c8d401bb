"""Token issuing and checking."""

import logfire

from agora.config import AuthSettings
from agora.domain.model import User
from agora.domain.value import UserId
from agora.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Issues the bearer token handed out at login and resolves it back to a user."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user: User) -> str:
        """Sign a token for a saved user.

        Raises:
            ValueError: If the user has not been saved yet
        """
        if user.id is None:
            raise ValueError("Cannot issue a token for an unsaved user")
        token = create_token(user.id, user.username.root, self.auth_settings)
        logfire.info("Token issued", user_id=user.id)
        return token

    def verify_token(self, token: str) -> TokenPayload:
        """Decode a token.

        Raises:
            JWTError: If the token is invalid or expired
        """
        try:
            return verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.warn("Token rejected", reason=str(e))
            raise

    def user_id_for(self, token: str) -> UserId:
        """ID of the user a token was issued to.

        Raises:
            JWTError: If the token is invalid or expired
        """
        return UserId(self.verify_token(token).user_id)
