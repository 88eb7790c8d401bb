"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, EmailStr, Field

from agora.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from agora.application.usecase.common import UserInfo
from agora.interface.api.auth import bearer_token

router = APIRouter(tags=["authentication"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for creating an account."""

    username: str = Field(min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(min_length=6, max_length=72)  # bcrypt uses 72 bytes


class LoginAPIRequest(BaseModel):
    """API request for logging in."""

    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=72)


@router.post(
    "/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Create an account.

    Returns:
        The new account (never includes the password hash)

    Raises:
        ValidationError: Malformed username (400)
        ConflictError: Username or e-mail already taken (400)
    """
    return await register_use_case.execute(
        RegisterRequest(
            username=request.username,
            email=str(request.email),
            password=request.password,
        )
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Exchange e-mail and password for a bearer token.

    Raises:
        AuthenticationError: Wrong e-mail or password (401)
    """
    return await login_use_case.execute(
        LoginRequest(email=request.email, password=request.password)
    )


@router.get("/me", response_model=UserInfo)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> UserInfo:
    """Get the authenticated user's account.

    Raises:
        HTTPException: Missing bearer token (401)
        JWTError: Invalid or expired token (401)
    """
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=bearer_token(authorization))
    )
