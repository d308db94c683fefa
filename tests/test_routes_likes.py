"""Like endpoints: the like lifecycle over HTTP."""

import pytest


@pytest.fixture
def post_id(client, register):
    _, headers = register("author")
    res = client.post(
        "/api/posts",
        json={"title": "Hello World", "content": "Long enough content."},
        headers=headers,
    )
    return res.json()["id"]


def test_like_flow(client, register, post_id):
    fan, headers = register("fan")

    res = client.post(f"/api/likes/post/{post_id}", headers=headers)
    assert res.status_code == 200
    assert res.json() == {"message": "Post liked successfully", "liked": True, "likes_count": 1}

    likes = client.get(f"/api/likes/post/{post_id}").json()
    assert [like["user_id"] for like in likes] == [fan["id"]]

    status_res = client.get(f"/api/likes/post/{post_id}/status", headers=headers)
    assert status_res.json() == {"has_liked": True}

    post = client.get(f"/api/posts/{post_id}").json()
    assert post["likes_count"] == 1


def test_duplicate_like_is_409(client, register, post_id):
    _, headers = register("fan")
    client.post(f"/api/likes/post/{post_id}", headers=headers)
    res = client.post(f"/api/likes/post/{post_id}", headers=headers)
    assert res.status_code == 409
    assert client.get(f"/api/posts/{post_id}").json()["likes_count"] == 1


def test_self_like_is_400(client, post_id):
    login = client.post("/api/auth/login", json={"user_name": "author", "password": "pwd123"})
    headers = {"Authorization": f"Bearer {login.json()['token']}"}
    res = client.post(f"/api/likes/post/{post_id}", headers=headers)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_OPERATION"


def test_like_missing_post_is_404(client, register):
    _, headers = register("fan")
    assert client.post("/api/likes/post/999", headers=headers).status_code == 404


def test_like_requires_token(client, post_id):
    assert client.post(f"/api/likes/post/{post_id}").status_code == 401


def test_unlike(client, register, post_id):
    _, headers = register("fan")
    client.post(f"/api/likes/post/{post_id}", headers=headers)

    res = client.delete(f"/api/likes/post/{post_id}", headers=headers)
    assert res.status_code == 200
    assert res.json()["likes_count"] == 0
    assert client.get(f"/api/likes/post/{post_id}/status", headers=headers).json() == {"has_liked": False}


def test_unlike_without_like_is_404(client, register, post_id):
    _, headers = register("fan")
    assert client.delete(f"/api/likes/post/{post_id}", headers=headers).status_code == 404
