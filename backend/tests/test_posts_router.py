# backend/tests/test_posts_router.py

from fastapi.testclient import TestClient

from postboard.main import create_app


def create_test_client() -> TestClient:
    app = create_app()
    return TestClient(app)


def _create(client: TestClient, title: str, body: str) -> dict:
    resp = client.post("/posts", json={"title": title, "body": body})
    assert resp.status_code == 200
    return resp.json()


def test_create_post_returns_increasing_ids() -> None:
    client = create_test_client()

    first = _create(client, "first", "hello")
    second = _create(client, "second", "world")

    assert first == {"id": 1, "title": "first", "body": "hello"}
    assert second["id"] > first["id"]


def test_create_post_malformed_json_returns_400() -> None:
    client = create_test_client()

    resp = client.post(
        "/posts",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert resp.status_code == 400


def test_get_post_success_and_not_found() -> None:
    client = create_test_client()
    created = _create(client, "title", "body")

    ok = client.get(f"/posts/{created['id']}")
    missing = client.get("/posts/999")

    assert ok.status_code == 200
    assert ok.json() == created
    assert missing.status_code == 404


def test_get_post_non_numeric_id_returns_400() -> None:
    client = create_test_client()

    resp = client.get("/posts/abc")

    assert resp.status_code == 400


def test_list_posts_sorted_by_id() -> None:
    client = create_test_client()
    for i in range(3):
        _create(client, f"t{i}", f"b{i}")

    # 後ろの投稿から順に更新しても一覧の順序は変わらない
    client.patch("/posts/3", json={"title": "t2-new", "body": "b2-new"})
    client.patch("/posts/1", json={"title": "t0-new", "body": "b0-new"})

    resp = client.get("/posts")

    assert resp.status_code == 200
    body = resp.json()
    assert [p["id"] for p in body] == [1, 2, 3]
    assert body[0]["title"] == "t0-new"


def test_list_posts_empty() -> None:
    client = create_test_client()

    resp = client.get("/posts")

    assert resp.status_code == 200
    assert resp.json() == []


def test_patch_post_overwrites_fields() -> None:
    client = create_test_client()
    created = _create(client, "old-title", "old-body")

    resp = client.patch(f"/posts/{created['id']}", json={"title": "new-title"})

    assert resp.status_code == 200
    # body は省略されたので空文字で上書きされる
    assert resp.json() == {"id": created["id"], "title": "new-title", "body": ""}


def test_patch_unknown_post_returns_404_without_mutation() -> None:
    client = create_test_client()
    _create(client, "keep", "me")

    resp = client.patch("/posts/5", json={"title": "x", "body": "y"})

    assert resp.status_code == 404
    listing = client.get("/posts").json()
    assert listing == [{"id": 1, "title": "keep", "body": "me"}]


def test_patch_malformed_json_returns_400() -> None:
    client = create_test_client()
    created = _create(client, "t", "b")

    resp = client.patch(
        f"/posts/{created['id']}",
        content="[broken",
        headers={"Content-Type": "application/json"},
    )

    assert resp.status_code == 400


def test_delete_post_then_get_returns_404() -> None:
    client = create_test_client()
    created = _create(client, "t", "b")

    deleted = client.delete(f"/posts/{created['id']}")
    after = client.get(f"/posts/{created['id']}")

    assert deleted.status_code == 204
    assert deleted.content == b""
    assert after.status_code == 404


def test_delete_unknown_post_returns_404() -> None:
    client = create_test_client()

    resp = client.delete("/posts/1")

    assert resp.status_code == 404


def test_health_check() -> None:
    client = create_test_client()

    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_patch_unknown_post_with_malformed_json_returns_404() -> None:
    """
    存在しない ID の場合、ボディが不正でも 404 が優先されること。
    """
    client = create_test_client()

    resp = client.patch(
        "/posts/9",
        content="{bad",
        headers={"Content-Type": "application/json"},
    )

    assert resp.status_code == 404


def test_patch_existing_post_with_wrong_field_type_returns_400() -> None:
    client = create_test_client()
    created = _create(client, "t", "b")

    resp = client.patch(f"/posts/{created['id']}", json={"title": ["not", "a", "string"]})

    assert resp.status_code == 400
    assert client.get(f"/posts/{created['id']}").json()["title"] == "t"


def test_patch_existing_post_with_empty_body_returns_400() -> None:
    client = create_test_client()
    created = _create(client, "t", "b")

    resp = client.patch(f"/posts/{created['id']}")

    assert resp.status_code == 400


def test_non_numeric_id_returns_400_on_every_route() -> None:
    client = create_test_client()

    assert client.get("/posts/abc").status_code == 400
    assert client.patch("/posts/abc", json={"title": "x", "body": "y"}).status_code == 400
    assert client.put("/posts/abc", json={"title": "x", "body": "y"}).status_code == 400
    assert client.delete("/posts/abc").status_code == 400


def test_id_out_of_64bit_range_returns_400() -> None:
    client = create_test_client()
    too_large = "99999999999999999999999"

    assert client.get(f"/posts/{too_large}").status_code == 400
    assert client.patch(f"/posts/{too_large}", json={"title": "x"}).status_code == 400
    assert client.delete(f"/posts/{too_large}").status_code == 400


def test_create_post_accepts_json_without_json_content_type() -> None:
    """
    Content-Type が application/json でなくても、ボディが JSON なら受け付けること。
    """
    client = create_test_client()

    resp = client.post(
        "/posts",
        content='{"title": "plain", "body": "text"}',
        headers={"Content-Type": "text/plain"},
    )

    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "title": "plain", "body": "text"}
