"""Register use case."""

import logfire
from pydantic import BaseModel

from agora.application.usecase.common import UserInfo
from agora.domain.service import UserService


class RegisterRequest(BaseModel):
    """Register request."""

    username: str
    email: str
    password: str


class RegisterResponse(BaseModel):
    """Register response."""

    message: str
    user: UserInfo


class RegisterUseCase:
    """Use case for creating an account with username, e-mail and password."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute registration flow.

        Args:
            request: Register request

        Returns:
            The created account

        Raises:
            ValidationError: If the username is malformed
            ConflictError: If the username or e-mail is taken
        """
        with logfire.span("register.execute", username=request.username):
            user = await self.user_service.register(
                username=request.username,
                email=request.email,
                password=request.password,
            )
            return RegisterResponse(
                message="User registered successfully",
                user=UserInfo.from_user(user),
            )
