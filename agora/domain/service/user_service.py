"""User domain service."""

from datetime import datetime
from typing import Sequence

import logfire
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from agora.domain.error import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from agora.domain.model import User
from agora.domain.repository import UserRepository
from agora.domain.value import UserId, Username
from agora.util.password import (
    MAX_PASSWORD_BYTES,
    hash_password,
    password_too_long,
    verify_password,
)

from .base import DEFAULT_OPERATION_TIMEOUT, Service
from .ownership import assert_owner


def _to_username(value: str) -> Username:
    try:
        return Username(value)
    except PydanticValidationError as e:
        raise ValidationError(e.errors()[0]["msg"])


def _normalize_email(email: str) -> str:
    return email.strip().lower()


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_rounds: int = 12,
        operation_timeout: float = DEFAULT_OPERATION_TIMEOUT,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            password_rounds: bcrypt work factor for new password hashes
            operation_timeout: Timeout for each persistence call, in seconds
        """
        self.user_repository = user_repository
        self.password_rounds = password_rounds
        self.operation_timeout = operation_timeout

    async def register(self, username: str, email: str, password: str) -> User:
        """Register a new user.

        Args:
            username: Desired username
            email: E-mail address (stored lower-cased)
            password: Plaintext password; only its bcrypt hash is kept

        Returns:
            The created user

        Raises:
            ValidationError: If the username is malformed or the password
                is longer than bcrypt accepts
            ConflictError: If the username or e-mail is already taken
        """
        email = _normalize_email(email)
        with logfire.span("user_service.register", username=username):
            name = _to_username(username)
            if password_too_long(password):
                raise ValidationError(
                    f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
                )

            if await self._bounded(self.user_repository.find_by_username(name.root)):
                logfire.warn("Username already taken", username=name.root)
                raise ConflictError("Username or email already exists")
            if await self._bounded(self.user_repository.find_by_email(email)):
                logfire.warn("Email already registered")
                raise ConflictError("Username or email already exists")

            user = User(
                username=name,
                email=email,
                password_hash=hash_password(password, self.password_rounds),
            )

            try:
                saved = await self._bounded(self.user_repository.save(user))
            except IntegrityError:
                # Lost a race with a concurrent registration
                logfire.warn("Duplicate registration", username=name.root)
                raise ConflictError("Username or email already exists")

            logfire.info("User registered", user_id=saved.id, username=name.root)
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check e-mail and password.

        Args:
            email: E-mail address
            password: Plaintext password

        Returns:
            The matching user

        Raises:
            AuthenticationError: If no user has this e-mail or the password is wrong
        """
        with logfire.span("user_service.authenticate"):
            user = await self._bounded(
                self.user_repository.find_by_email(_normalize_email(email))
            )
            if user is None or not verify_password(password, user.password_hash):
                logfire.warn("Invalid login attempt")
                raise AuthenticationError("Invalid credentials")

            logfire.info("User authenticated", user_id=user.id)
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self._bounded(self.user_repository.find_by_id(user_id))
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", user_id)
            return user

    async def get_many(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Load several users at once, keyed by ID. Unknown IDs are absent."""
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        users = await self._bounded(self.user_repository.find_by_ids(unique_ids))
        return {user.id: user for user in users if user.id is not None}

    async def update_profile(
        self,
        user_id: UserId,
        caller_id: UserId,
        username: str | None = None,
        bio: str | None = None,
    ) -> User:
        """Update a user's own profile.

        Only fields that are not None are changed.

        Args:
            user_id: Profile being edited
            caller_id: Authenticated caller (must be the same user)
            username: New username
            bio: New bio

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
            NotAuthorizedError: If the caller is editing someone else
            ConflictError: If the new username is taken
        """
        with logfire.span(
            "user_service.update_profile", user_id=user_id, caller_id=caller_id
        ):
            user = await self.get_by_id(user_id)
            assert_owner("user", user_id, user_id, caller_id)

            updates: dict = {}
            if username is not None and username != user.username.root:
                name = _to_username(username)
                taken = await self._bounded(
                    self.user_repository.find_by_username(name.root)
                )
                if taken is not None:
                    raise ConflictError(f"Username '{name.root}' is already taken")
                updates["username"] = name
            if bio is not None:
                updates["bio"] = bio

            if not updates:
                return user

            updated = user.model_copy(
                update={**updates, "updated_at": datetime.now()}
            )
            try:
                saved = await self._bounded(self.user_repository.save(updated))
            except IntegrityError:
                raise ConflictError(f"Username '{username}' is already taken")

            logfire.info(
                "User profile updated", user_id=user_id, fields=sorted(updates)
            )
            return saved
