"""End-to-end tests against the SQL repositories on a temporary SQLite file.

These run the whole request path, including the per-request session that
commits on success and rolls back on error.
"""

from sqlalchemy.exc import OperationalError

from agora.persistence.repository import PostgresPostRepository
from tests.harness import create_client_fixture, register_and_login

# E2E test fixture - real persistence
client = create_client_fixture(unmock={"persistence"})


class TestSqlBackend:
    """Core scenarios on the SQL backend."""

    def test_post_and_vote_toggle(self, client):
        # Arrange
        alice_id, alice = register_and_login(client, "alice")
        _, bob = register_and_login(client, "bob")
        post_id = client.post(
            "/posts", json={"title": "Hello", "body": "From SQL"}, headers=alice
        ).json()["post_id"]

        # Act
        outcomes = [
            client.post(
                f"/posts/{post_id}/vote", json={"direction": direction}, headers=bob
            ).json()["outcome"]
            for direction in (1, 1, -1, 1)
        ]

        # Assert
        assert outcomes == ["recorded", "removed", "recorded", "updated"]
        [post] = client.get("/posts").json()
        assert post["author_id"] == alice_id
        assert post["upvotes"] == 1
        assert post["downvotes"] == 0

    def test_duplicate_registration_rolls_back(self, client):
        register_and_login(client, "alice")

        response = client.post(
            "/register",
            json={
                "username": "alice",
                "email": "alice2@example.com",
                "password": "secret123",
            },
        )

        assert response.status_code == 400
        # The database is still usable after the failed request
        register_and_login(client, "bob")

    def test_delete_post_removes_comments_and_votes(self, client):
        # Arrange
        _, alice = register_and_login(client, "alice")
        _, bob = register_and_login(client, "bob")
        post_id = client.post("/posts", json={"title": "Doomed"}, headers=alice).json()[
            "post_id"
        ]
        client.post(f"/posts/{post_id}/vote", json={"direction": 1}, headers=bob)
        comment_id = client.post(
            f"/posts/{post_id}/comments", json={"body": "bye"}, headers=bob
        ).json()["comment_id"]

        # Act
        response = client.delete(f"/posts/{post_id}", headers=alice)

        # Assert
        assert response.status_code == 200
        assert client.get(f"/posts/{post_id}").status_code == 404
        assert client.get(f"/comments/{comment_id}").status_code == 404

    def test_failed_delete_keeps_comments_and_votes(self, client, monkeypatch):
        """A request that ends in an error response commits none of its writes."""
        # Arrange
        _, alice = register_and_login(client, "alice")
        _, bob = register_and_login(client, "bob")
        post_id = client.post("/posts", json={"title": "Sturdy"}, headers=alice).json()[
            "post_id"
        ]
        client.post(f"/posts/{post_id}/vote", json={"direction": 1}, headers=bob)
        comment_id = client.post(
            f"/posts/{post_id}/comments", json={"body": "still here"}, headers=bob
        ).json()["comment_id"]

        async def failing_delete(self, post_id):
            raise OperationalError("DELETE FROM posts", {}, Exception("disk I/O error"))

        monkeypatch.setattr(PostgresPostRepository, "delete", failing_delete)

        # Act
        response = client.delete(f"/posts/{post_id}", headers=alice)

        # Assert
        assert response.status_code == 500
        assert client.get(f"/posts/{post_id}").status_code == 200
        comment = client.get(f"/comments/{comment_id}")
        assert comment.status_code == 200
        assert comment.json()["body"] == "still here"
        vote = client.get(f"/posts/{post_id}/vote", headers=bob).json()
        assert vote["direction"] == 1
        assert vote["upvotes"] == 1

    def test_follow_graph(self, client):
        alice_id, _ = register_and_login(client, "alice")
        bob_id, bob = register_and_login(client, "bob")

        client.post(f"/users/{alice_id}/follow", headers=bob)
        followers = client.get(f"/users/{alice_id}/followers").json()
        client.delete(f"/users/{alice_id}/follow", headers=bob)

        assert [u["user_id"] for u in followers] == [bob_id]
        assert client.get(f"/users/{alice_id}/followers").json() == []
