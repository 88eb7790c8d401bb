"""End-to-end tests for registration, login and token handling."""

from tests.harness import auth_header, create_client_fixture, register_and_login

# E2E test fixture - in-memory persistence behind the real app
client = create_client_fixture()


class TestRegister:
    """POST /register."""

    def test_register_returns_created_user(self, client):
        # Act
        response = client.post(
            "/register",
            json={
                "username": "alice",
                "email": "alice@example.com",
                "password": "secret123",
            },
        )

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "User registered successfully"
        assert data["user"]["username"] == "alice"
        assert "password" not in data["user"]
        assert "password_hash" not in data["user"]

    def test_duplicate_registration_is_bad_request(self, client):
        body = {
            "username": "alice",
            "email": "alice@example.com",
            "password": "secret123",
        }
        assert client.post("/register", json=body).status_code == 201

        response = client.post("/register", json=body)

        assert response.status_code == 400
        assert response.json() == {"detail": "Username or email already exists"}

    def test_short_password_is_bad_request(self, client):
        response = client.post(
            "/register",
            json={"username": "alice", "email": "alice@example.com", "password": "123"},
        )

        assert response.status_code == 400
        assert "password" in response.json()["detail"]

    def test_multibyte_password_over_byte_limit_is_bad_request(self, client):
        response = client.post(
            "/register",
            json={
                "username": "alice",
                "email": "alice@example.com",
                "password": "é" * 40,
            },
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Password must be at most 72 bytes"}

    def test_invalid_email_is_bad_request(self, client):
        response = client.post(
            "/register",
            json={"username": "alice", "email": "not-an-email", "password": "secret123"},
        )

        assert response.status_code == 400


class TestLogin:
    """POST /login and GET /me."""

    def test_login_then_me(self, client):
        # Arrange
        user_id, headers = register_and_login(client, "alice")

        # Act
        response = client.get("/me", headers=headers)

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["user_id"] == user_id
        assert data["email"] == "alice@example.com"

    def test_wrong_password_is_unauthorized(self, client):
        register_and_login(client, "alice")

        response = client.post(
            "/login", json={"email": "alice@example.com", "password": "wrong-one"}
        )

        assert response.status_code == 401
        assert response.json() == {"detail": "Invalid credentials"}

    def test_me_without_token_is_unauthorized(self, client):
        response = client.get("/me")

        assert response.status_code == 401

    def test_me_with_garbage_token_is_unauthorized(self, client):
        response = client.get("/me", headers=auth_header("garbage"))

        assert response.status_code == 401
        assert response.json() == {"detail": "Invalid token"}


class TestHealth:
    """GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"
        assert "timestamp" in data
