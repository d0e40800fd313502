from bson import ObjectId

from social_posts.domain.repositories.post_repository import PostRepository

from tests.fixtures import (
    COMMENT_ID,
    CREATED_AT_ISO,
    LIKER_ID,
    POST_ID,
    UPDATED_AT_ISO,
)

POST_KEYS = {"id", "body", "owner", "comments", "likes", "createdAt", "updatedAt"}


class TestCreatePostRoute:
    def test_creates_post(self, client, auth_headers, user):
        response = client.post("/posts/create", json={"postBody": "Hello world!"}, headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert set(body) == POST_KEYS
        assert body["body"] == "Hello world!"
        assert body["owner"] == {
            "id": user.id,
            "name": user.name,
            "surname": user.surname,
            "avatar": user.avatar,
        }
        assert body["comments"] == []
        assert body["likes"] == []
        assert body["createdAt"] == body["updatedAt"]
        assert body["createdAt"].endswith("Z")
        assert ObjectId.is_valid(body["id"])

    def test_missing_token(self, client):
        response = client.post("/posts/create", json={"postBody": "Hello"}, headers={"Authorization": ""})

        assert response.status_code == 403
        assert response.text == "Required token was not provided"

    def test_missing_header(self, client):
        response = client.post("/posts/create", json={"postBody": "Hello"})

        assert response.status_code == 403

    def test_expired_token(self, client, expired_token):
        response = client.post(
            "/posts/create",
            json={"postBody": "Hello"},
            headers={"Authorization": f"bearer {expired_token}"},
        )

        assert response.status_code == 401
        assert response.text == "Token expired"

    def test_invalid_token(self, client):
        response = client.post(
            "/posts/create", json={"postBody": "Hello"}, headers={"Authorization": "bearer garbage"}
        )

        assert response.status_code == 401
        assert response.text == "Invalid token"

    def test_unknown_user(self, client, unknown_user_token):
        response = client.post(
            "/posts/create",
            json={"postBody": "Hello"},
            headers={"Authorization": f"bearer {unknown_user_token}"},
        )

        assert response.status_code == 400
        assert response.text == "User does not exist"

    def test_null_result_is_internal_error(self, mocker, client, container, auth_headers):
        mocker.patch.object(container.get(PostRepository), "create_post", return_value=None)

        response = client.post("/posts/create", json={"postBody": "Hello"}, headers=auth_headers)

        assert response.status_code == 500
        assert response.text == "Internal Server Error"

    def test_data_source_error_is_internal_error(self, mocker, client, container, auth_headers):
        mocker.patch.object(
            container.get(PostRepository), "create_post", side_effect=Exception("Testing error")
        )

        response = client.post("/posts/create", json={"postBody": "Hello"}, headers=auth_headers)

        assert response.status_code == 500
        assert response.text == "Internal Server Error"
        assert "Testing error" not in response.text


class TestReadRoutes:
    def test_list_posts(self, client, auth_headers, seeded_posts):
        response = client.get("/posts", headers=auth_headers)

        assert response.status_code == 200
        assert len(response.json()) == 2

    def test_get_post(self, client, auth_headers, seeded_posts):
        response = client.get(f"/posts/{POST_ID}", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert set(body) == POST_KEYS
        assert body["createdAt"] == CREATED_AT_ISO
        assert body["updatedAt"] == UPDATED_AT_ISO
        assert body["comments"][0]["id"] == str(COMMENT_ID)
        assert body["likes"] == [
            {
                "id": LIKER_ID,
                "name": "Ann",
                "surname": "Lee",
                "avatar": "https://cdn.example.com/avatars/ann.png",
            }
        ]

    def test_get_missing_post(self, client, auth_headers, seeded_posts):
        response = client.get(f"/posts/{ObjectId()}", headers=auth_headers)

        assert response.status_code == 404
        assert response.text == "Post not found"

    def test_get_post_requires_token(self, client, seeded_posts):
        response = client.get(f"/posts/{POST_ID}")

        assert response.status_code == 403

    def test_get_comment(self, client, auth_headers, seeded_posts):
        response = client.get(f"/posts/{POST_ID}/comments/{COMMENT_ID}", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["body"] == "Nice post!"
        assert body["createdAt"] == UPDATED_AT_ISO

    def test_get_missing_comment(self, client, auth_headers, seeded_posts):
        response = client.get(f"/posts/{POST_ID}/comments/{ObjectId()}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() is None

    def test_get_like(self, client, auth_headers, seeded_posts):
        response = client.get(f"/posts/{POST_ID}/likes/{LIKER_ID}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["id"] == LIKER_ID

    def test_get_missing_like(self, client, auth_headers, user, seeded_posts):
        response = client.get(f"/posts/{POST_ID}/likes/{user.id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() is None


class TestWriteRoutes:
    def test_comment_post(self, client, auth_headers, user, seeded_posts):
        response = client.post(
            "/posts/comment",
            json={"postId": str(POST_ID), "commentBody": "Agreed"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        comment = response.json()["comments"][-1]
        assert comment["body"] == "Agreed"
        assert comment["owner"]["id"] == user.id

    def test_comment_missing_post(self, client, auth_headers, seeded_posts):
        response = client.post(
            "/posts/comment",
            json={"postId": str(ObjectId()), "commentBody": "Agreed"},
            headers=auth_headers,
        )

        assert response.status_code == 500
        assert response.text == "Internal Server Error"

    def test_like_and_dislike(self, client, auth_headers, user, seeded_posts):
        liked = client.post("/posts/like", json={"postId": str(POST_ID)}, headers=auth_headers)

        assert liked.status_code == 200
        assert [like["id"] for like in liked.json()["likes"]] == [LIKER_ID, user.id]

        disliked = client.post("/posts/dislike", json={"postId": str(POST_ID)}, headers=auth_headers)

        assert disliked.status_code == 200
        assert [like["id"] for like in disliked.json()["likes"]] == [LIKER_ID]

    def test_like_missing_post(self, client, auth_headers, seeded_posts):
        response = client.post("/posts/like", json={"postId": str(ObjectId())}, headers=auth_headers)

        assert response.status_code == 500

    def test_invalid_body(self, client, auth_headers):
        response = client.post("/posts/create", json={}, headers=auth_headers)

        assert response.status_code == 422


class TestServiceRoutes:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}
