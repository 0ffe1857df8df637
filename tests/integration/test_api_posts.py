"""
Integration tests for the /posts endpoints.
"""
import pytest

pytestmark = pytest.mark.integration


def create_post(client, headers, title="Hello", content="World"):
    response = client.post("/posts", json={"title": title, "content": content}, headers=headers)
    assert response.status_code == 201
    return response


def only_post(client):
    posts = client.get("/posts").json()
    assert len(posts) == 1
    return posts[0]


class TestPostsAPI:

    def test_list_is_public_and_initially_empty(self, client):
        response = client.get("/posts")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_and_list_shows_owner(self, client, signup_and_login):
        headers = signup_and_login("alice")

        response = create_post(client, headers)

        assert response.json() == {"message": "Post created successfully"}
        post = only_post(client)
        assert post["title"] == "Hello"
        assert post["content"] == "World"
        assert post["user"]["username"] == "alice"
        assert post["likes"] == 0
        assert post["dislikes"] == 0

    def test_create_without_token_returns_401(self, client):
        response = client.post("/posts", json={"title": "T", "content": "C"})
        assert response.status_code == 401

    def test_create_with_bad_token_returns_403(self, client):
        response = client.post(
            "/posts", json={"title": "T", "content": "C"},
            headers={"Authorization": "Bearer not.a.token"},
        )
        assert response.status_code == 403

    def test_non_bearer_scheme_is_treated_as_missing_token(self, client):
        response = client.post(
            "/posts", json={"title": "T", "content": "C"},
            headers={"Authorization": "Token abc"},
        )
        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_create_missing_content_returns_400(self, client, signup_and_login):
        headers = signup_and_login("alice")
        response = client.post("/posts", json={"title": "T"}, headers=headers)
        assert response.status_code == 400

    def test_owner_can_update(self, client, signup_and_login):
        headers = signup_and_login("alice")
        create_post(client, headers)
        post_id = only_post(client)["id"]

        response = client.put(f"/posts/{post_id}", json={"title": "New", "content": "Body"}, headers=headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Post updated successfully"}
        post = only_post(client)
        assert (post["title"], post["content"]) == ("New", "Body")

    def test_non_owner_cannot_update_or_delete(self, client, signup_and_login):
        alice = signup_and_login("alice")
        bob = signup_and_login("bob")
        create_post(client, alice)
        post_id = only_post(client)["id"]

        update = client.put(f"/posts/{post_id}", json={"title": "X", "content": "Y"}, headers=bob)
        delete = client.delete(f"/posts/{post_id}", headers=bob)

        assert update.status_code == 403
        assert delete.status_code == 403
        assert only_post(client)["title"] == "Hello"

    def test_owner_can_delete(self, client, signup_and_login):
        alice = signup_and_login("alice")
        create_post(client, alice)
        post_id = only_post(client)["id"]

        response = client.delete(f"/posts/{post_id}", headers=alice)

        assert response.status_code == 200
        assert response.json() == {"message": "Post deleted successfully"}
        assert client.get("/posts").json() == []

    def test_unknown_post_returns_404(self, client, signup_and_login):
        headers = signup_and_login("alice")

        assert client.put("/posts/missing", json={"title": "X", "content": "Y"}, headers=headers).status_code == 404
        assert client.delete("/posts/missing", headers=headers).status_code == 404
        assert client.post("/posts/missing/like").status_code == 404
        assert client.post("/posts/missing/dislike").status_code == 404

    def test_reactions_are_anonymous_and_cumulative(self, client, signup_and_login):
        create_post(client, signup_and_login("alice"))
        post_id = only_post(client)["id"]

        for _ in range(3):
            response = client.post(f"/posts/{post_id}/like")
            assert response.status_code == 200
            assert response.json() == {"message": "Like added successfully"}
        response = client.post(f"/posts/{post_id}/dislike")

        assert response.json() == {"message": "Dislike added successfully"}
        post = only_post(client)
        assert post["likes"] == 3
        assert post["dislikes"] == 1
