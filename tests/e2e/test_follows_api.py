"""End-to-end tests for profiles and the follow graph."""

from tests.harness import create_client_fixture, register_and_login

# E2E test fixture - in-memory persistence behind the real app
client = create_client_fixture()


class TestFollowFlow:
    """Follow, list followers, unfollow."""

    def test_follow_then_unfollow(self, client):
        """bob follows alice, shows up as a follower, then unfollows."""
        # Arrange
        alice_id, alice = register_and_login(client, "alice")
        bob_id, bob = register_and_login(client, "bob")

        # Act - follow
        followed = client.post(f"/users/{alice_id}/follow", headers=bob)

        # Assert
        assert followed.status_code == 200
        assert followed.json() == {"message": "User followed successfully"}
        followers = client.get(f"/users/{alice_id}/followers").json()
        assert [u["user_id"] for u in followers] == [bob_id]
        following = client.get(f"/users/{bob_id}/following").json()
        assert [u["username"] for u in following] == ["alice"]
        status = client.get(f"/users/{alice_id}/follow-status", headers=bob).json()
        assert status == {"following": True}

        # Act - unfollow
        unfollowed = client.delete(f"/users/{alice_id}/follow", headers=bob)

        # Assert
        assert unfollowed.status_code == 200
        assert client.get(f"/users/{alice_id}/followers").json() == []
        status = client.get(f"/users/{alice_id}/follow-status", headers=bob).json()
        assert status == {"following": False}

    def test_self_follow_is_bad_request(self, client):
        alice_id, alice = register_and_login(client, "alice")

        response = client.post(f"/users/{alice_id}/follow", headers=alice)

        assert response.status_code == 400
        assert response.json() == {"detail": "Cannot follow yourself"}

    def test_follow_missing_user_is_not_found(self, client):
        _, alice = register_and_login(client, "alice")

        response = client.post("/users/999/follow", headers=alice)

        assert response.status_code == 404

    def test_follow_lists_of_missing_user_are_empty(self, client):
        followers = client.get("/users/42/followers")
        following = client.get("/users/42/following")

        assert followers.status_code == 200
        assert followers.json() == []
        assert following.status_code == 200
        assert following.json() == []

    def test_follow_twice_is_bad_request(self, client):
        alice_id, _ = register_and_login(client, "alice")
        _, bob = register_and_login(client, "bob")
        client.post(f"/users/{alice_id}/follow", headers=bob)

        response = client.post(f"/users/{alice_id}/follow", headers=bob)

        assert response.status_code == 400

    def test_follow_status_requires_token(self, client):
        alice_id, _ = register_and_login(client, "alice")

        response = client.get(f"/users/{alice_id}/follow-status")

        assert response.status_code == 401


class TestProfiles:
    """GET and PUT /users/{id}."""

    def test_profile_with_posts_and_counts(self, client):
        # Arrange
        alice_id, alice = register_and_login(client, "alice")
        _, bob = register_and_login(client, "bob")
        client.post("/posts", json={"title": "Hello"}, headers=alice)
        client.post(f"/users/{alice_id}/follow", headers=bob)

        # Act
        response = client.get(f"/users/{alice_id}")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["user"]["username"] == "alice"
        assert "email" not in data["user"]
        assert [p["title"] for p in data["posts"]] == ["Hello"]
        assert data["follower_count"] == 1
        assert data["following_count"] == 0

    def test_missing_profile_is_not_found(self, client):
        assert client.get("/users/999").status_code == 404

    def test_update_own_profile(self, client):
        alice_id, alice = register_and_login(client, "alice")

        response = client.put(
            f"/users/{alice_id}", json={"bio": "Hi, I'm Alice"}, headers=alice
        )

        assert response.status_code == 200
        assert response.json()["bio"] == "Hi, I'm Alice"

    def test_update_other_profile_is_forbidden(self, client):
        alice_id, _ = register_and_login(client, "alice")
        _, bob = register_and_login(client, "bob")

        response = client.put(f"/users/{alice_id}", json={"bio": "hacked"}, headers=bob)

        assert response.status_code == 403
        assert client.get(f"/users/{alice_id}").json()["user"]["bio"] is None
