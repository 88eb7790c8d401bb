"""Unit tests for the exception-to-status mapping and bearer parsing."""

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient
from pydantic import BaseModel

from agora.domain.error import (
    AuthenticationError,
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from agora.interface.api.auth import bearer_token
from agora.interface.api.errors import register_exception_handlers
from agora.util.jwt import JWTError

ERRORS = {
    "validation": ValidationError("Cannot follow yourself"),
    "conflict": ConflictError("Already following this user"),
    "authentication": AuthenticationError("Invalid credentials"),
    "jwt": JWTError("Token has expired"),
    "forbidden": NotAuthorizedError("post", 1, 2),
    "not-found": NotFoundError("Post", 9),
    "persistence": PersistenceError("connection refused by db-host:5432"),
    "unexpected": RuntimeError("boom"),
}


class Body(BaseModel):
    direction: int


@pytest.fixture
def client():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/raise/{name}")
    async def raise_error(name: str):
        raise ERRORS[name]

    @app.post("/body")
    async def needs_body(body: Body):
        return body

    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.parametrize(
    "name, status_code, detail",
    [
        ("validation", 400, "Cannot follow yourself"),
        ("conflict", 400, "Already following this user"),
        ("authentication", 401, "Invalid credentials"),
        ("jwt", 401, "Token has expired"),
        ("forbidden", 403, "You can only modify your own post"),
        ("not-found", 404, "Post not found: 9"),
        ("persistence", 500, "An internal error occurred"),
        ("unexpected", 500, "An unexpected error occurred"),
    ],
)
def test_error_maps_to_status(client, name, status_code, detail):
    response = client.get(f"/raise/{name}")

    assert response.status_code == status_code
    assert response.json() == {"detail": detail}


def test_persistence_details_are_not_leaked(client):
    response = client.get("/raise/persistence")

    assert "db-host" not in response.text


def test_malformed_body_is_bad_request(client):
    response = client.post("/body", json={"direction": "sideways"})

    assert response.status_code == 400
    assert response.json()["detail"].startswith("direction:")


class TestBearerToken:
    """Tests for bearer_token()."""

    def test_extracts_token(self):
        assert bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    @pytest.mark.parametrize("header", [None, "", "Basic abc", "Bearer ", "abc"])
    def test_missing_or_malformed_header(self, header):
        with pytest.raises(HTTPException) as exc_info:
            bearer_token(header)

        assert exc_info.value.status_code == 401
