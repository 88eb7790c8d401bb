"""End-to-end tests for voting."""

from tests.harness import create_client_fixture, register_and_login

# E2E test fixture - in-memory persistence behind the real app
client = create_client_fixture()


def _post_by_alice(client) -> int:
    _, alice = register_and_login(client, "alice")
    response = client.post("/posts", json={"title": "Vote on me"}, headers=alice)
    return response.json()["post_id"]


class TestVoteToggle:
    """POST /posts/{id}/vote and GET /posts/{id}/vote."""

    def test_toggle_sequence(self, client):
        """+1 is recorded, +1 again removes it, -1 records a down vote."""
        # Arrange
        post_id = _post_by_alice(client)
        _, bob = register_and_login(client, "bob")

        def vote(direction):
            return client.post(
                f"/posts/{post_id}/vote", json={"direction": direction}, headers=bob
            )

        # Act & Assert - +1
        response = vote(1)
        assert response.status_code == 200
        assert response.json()["outcome"] == "recorded"
        assert client.get(f"/posts/{post_id}/vote", headers=bob).json()[
            "direction"
        ] == 1

        # Act & Assert - +1 again removes
        response = vote(1)
        assert response.json()["outcome"] == "removed"
        assert response.json()["direction"] is None
        assert response.json()["message"] == "Vote removed"
        state = client.get(f"/posts/{post_id}/vote", headers=bob).json()
        assert state["direction"] is None
        assert state["score"] == 0

        # Act & Assert - -1
        response = vote(-1)
        assert response.json()["outcome"] == "recorded"
        state = client.get(f"/posts/{post_id}/vote", headers=bob).json()
        assert state["direction"] == -1
        assert state["downvotes"] == 1
        assert state["score"] == -1

    def test_flip_updates_vote(self, client):
        post_id = _post_by_alice(client)
        _, bob = register_and_login(client, "bob")
        client.post(f"/posts/{post_id}/vote", json={"direction": 1}, headers=bob)

        response = client.post(
            f"/posts/{post_id}/vote", json={"direction": -1}, headers=bob
        )

        data = response.json()
        assert data["outcome"] == "updated"
        assert (data["upvotes"], data["downvotes"], data["score"]) == (0, 1, -1)

    def test_listing_reflects_votes(self, client):
        post_id = _post_by_alice(client)
        _, bob = register_and_login(client, "bob")
        _, carol = register_and_login(client, "carol")
        client.post(f"/posts/{post_id}/vote", json={"direction": 1}, headers=bob)
        client.post(f"/posts/{post_id}/vote", json={"direction": 1}, headers=carol)

        [post] = client.get("/posts").json()

        assert post["upvotes"] == 2
        assert post["score"] == 2


class TestVoteErrors:
    """Vote failures."""

    def test_vote_on_missing_post_is_not_found(self, client):
        _, bob = register_and_login(client, "bob")

        response = client.post("/posts/999/vote", json={"direction": 1}, headers=bob)

        assert response.status_code == 404

    def test_invalid_direction_is_bad_request(self, client):
        post_id = _post_by_alice(client)
        _, bob = register_and_login(client, "bob")

        response = client.post(
            f"/posts/{post_id}/vote", json={"direction": 0}, headers=bob
        )

        assert response.status_code == 400
        assert client.get(f"/posts/{post_id}/vote", headers=bob).json()[
            "direction"
        ] is None

    def test_vote_requires_token(self, client):
        post_id = _post_by_alice(client)

        response = client.post(f"/posts/{post_id}/vote", json={"direction": 1})

        assert response.status_code == 401
