"""Post endpoints: CRUD, search and authorship rules over HTTP."""

import pytest


CONTENT = "This content has more than ten characters."


@pytest.fixture
def author(register):
    return register("author")


@pytest.fixture
def created_post(client, author):
    _, headers = author
    res = client.post("/api/posts", json={"title": "Welcome to the Blog", "content": CONTENT}, headers=headers)
    assert res.status_code == 201, res.text
    return res.json()


def test_create_post(client, author, created_post):
    user, _ = author
    assert created_post["id"] == 1
    assert created_post["author_id"] == user["id"]
    assert created_post["updated_at"] is None
    assert created_post["likes"] == []
    assert created_post["likes_count"] == 0


def test_create_post_sets_location_header(client, author):
    _, headers = author
    res = client.post("/api/posts", json={"title": "Located", "content": CONTENT}, headers=headers)
    assert res.headers["location"] == f"/api/posts/{res.json()['id']}"


def test_create_post_requires_token(client):
    res = client.post("/api/posts", json={"title": "Anonymous", "content": CONTENT})
    assert res.status_code == 401


@pytest.mark.parametrize(
    "payload",
    [
        {"title": "ab", "content": CONTENT},
        {"title": "x" * 101, "content": CONTENT},
        {"title": "   ", "content": CONTENT},
        {"title": "Valid title", "content": "too short"},
        {"title": "Valid title", "content": "x" * 5001},
        {"content": CONTENT},
    ],
)
def test_create_post_validation_is_400(client, author, payload):
    _, headers = author
    res = client.post("/api/posts", json=payload, headers=headers)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


def test_get_post(client, created_post):
    res = client.get(f"/api/posts/{created_post['id']}")
    assert res.status_code == 200
    assert res.json()["title"] == "Welcome to the Blog"


def test_get_missing_post_is_404(client):
    res = client.get("/api/posts/999")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "NOT_FOUND"


def test_list_posts_search(client, author, created_post):
    _, headers = author
    client.post("/api/posts", json={"title": "Unrelated", "content": CONTENT}, headers=headers)

    everything = client.get("/api/posts").json()
    empty_search = client.get("/api/posts", params={"search": ""}).json()
    matched = client.get("/api/posts", params={"search": "WELCOME"}).json()

    assert len(everything) == len(empty_search) == 2
    assert [p["title"] for p in matched] == ["Welcome to the Blog"]
    assert matched[0]["author_name"] == "author"


def test_update_post_by_author(client, author, created_post):
    _, headers = author
    res = client.put(
        f"/api/posts/{created_post['id']}",
        json={"title": "Edited title", "content": "Edited content body"},
        headers=headers,
    )
    assert res.status_code == 200
    body = res.json()
    assert body["title"] == "Edited title"
    assert body["updated_at"] is not None
    assert body["created_at"] == created_post["created_at"]
    assert body["author_id"] == created_post["author_id"]


def test_update_post_by_other_user_is_403(client, register, created_post):
    _, other_headers = register("intruder")
    res = client.put(
        f"/api/posts/{created_post['id']}",
        json={"title": "Hijacked", "content": "Hijacked content"},
        headers=other_headers,
    )
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "FORBIDDEN"


def test_update_missing_post_is_404(client, author):
    _, headers = author
    res = client.put("/api/posts/999", json={"title": "Nothing", "content": CONTENT}, headers=headers)
    assert res.status_code == 404


def test_delete_post_cascades_likes(client, register, author, created_post):
    _, author_headers = author
    _, fan_headers = register("fan")
    post_id = created_post["id"]
    assert client.post(f"/api/likes/post/{post_id}", headers=fan_headers).status_code == 200

    res = client.delete(f"/api/posts/{post_id}", headers=author_headers)
    assert res.status_code == 204
    assert client.get(f"/api/posts/{post_id}").status_code == 404
    assert client.get(f"/api/likes/post/{post_id}").json() == []


def test_delete_post_by_other_user_is_403(client, register, created_post):
    _, other_headers = register("intruder")
    res = client.delete(f"/api/posts/{created_post['id']}", headers=other_headers)
    assert res.status_code == 403
    assert client.get(f"/api/posts/{created_post['id']}").status_code == 200


def test_get_post_includes_author(client, created_post):
    body = client.get(f"/api/posts/{created_post['id']}").json()
    assert body["author_name"] == "author"
    assert body["author"]["id"] == created_post["author_id"]
