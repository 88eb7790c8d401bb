"""Unit tests for JWTService and the token helpers."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from agora.config import AuthSettings
from agora.domain.model import User
from agora.domain.service import JWTService
from agora.domain.value import Username
from agora.util.jwt import JWTError, create_token

SETTINGS = AuthSettings(jwt_secret="unit-test-secret-that-is-long-enough")

ALICE = User(
    id=5,
    username=Username("alice"),
    email="alice@example.com",
    password_hash="hash",
)


class TestJWTService:
    """Tests for token issue and verification."""

    def test_token_round_trip(self):
        service = JWTService(SETTINGS)

        token = service.create_token(ALICE)
        payload = service.verify_token(token)

        assert payload.user_id == 5
        assert payload.username == "alice"
        assert payload.expires_at - payload.issued_at == timedelta(days=30)
        assert service.user_id_for(token) == 5

    def test_unsaved_user_gets_no_token(self):
        unsaved = ALICE.model_copy(update={"id": None})

        with pytest.raises(ValueError, match="unsaved"):
            JWTService(SETTINGS).create_token(unsaved)

    def test_token_signed_with_other_secret_is_rejected(self):
        other = JWTService(AuthSettings(jwt_secret="another-secret-that-is-long-enough"))
        token = other.create_token(ALICE)

        with pytest.raises(JWTError, match="Invalid token"):
            JWTService(SETTINGS).verify_token(token)

    def test_expired_token_is_rejected(self):
        long_ago = datetime.now(timezone.utc) - timedelta(days=31)
        expired = create_token(5, "alice", SETTINGS, now=long_ago)

        with pytest.raises(JWTError, match="expired"):
            JWTService(SETTINGS).verify_token(expired)

    def test_garbage_is_rejected(self):
        with pytest.raises(JWTError, match="Invalid token"):
            JWTService(SETTINGS).user_id_for("garbage")

    def test_token_without_subject_is_rejected(self):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"user_id": 5, "iat": now, "exp": now + timedelta(hours=1)},
            SETTINGS.jwt_secret,
            algorithm=SETTINGS.jwt_algorithm,
        )

        with pytest.raises(JWTError):
            JWTService(SETTINGS).verify_token(token)

    def test_non_numeric_subject_is_malformed(self):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"sub": "alice", "iat": now, "exp": now + timedelta(hours=1)},
            SETTINGS.jwt_secret,
            algorithm=SETTINGS.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="Malformed"):
            JWTService(SETTINGS).verify_token(token)
