"""Login use case."""

import logfire
from pydantic import BaseModel

from agora.application.usecase.common import UserInfo
from agora.domain.service import JWTService, UserService


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    message: str
    token: str
    user: UserInfo


class LoginUseCase:
    """Use case for e-mail and password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Check credentials via user service
        2. Issue a JWT token for the user

        Args:
            request: Login request

        Returns:
            Login response with JWT token and user info

        Raises:
            AuthenticationError: If the credentials don't match
        """
        with logfire.span("login.execute"):
            user = await self.user_service.authenticate(
                request.email, request.password
            )
            token = self.jwt_service.create_token(user)

            return LoginResponse(
                message="Login successful",
                token=token,
                user=UserInfo.from_user(user),
            )
