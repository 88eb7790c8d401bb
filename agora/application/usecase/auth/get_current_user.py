"""Get current user use case."""

from pydantic import BaseModel

from agora.application.usecase.common import UserInfo
from agora.domain.service import JWTService, UserService


class GetCurrentUserRequest(BaseModel):
    """Bearer token of the caller."""

    token: str


class GetCurrentUserUseCase:
    """Resolve a bearer token to the caller's own account."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserInfo:
        """Look up the account a token was issued to.

        Raises:
            JWTError: If the token is invalid or expired
            NotFoundError: If the account has since been removed
        """
        user_id = self.jwt_service.user_id_for(request.token)
        return UserInfo.from_user(await self.user_service.get_by_id(user_id))
