"""Tests for post submission, feed and moderation endpoints."""

from unittest.mock import patch

import pytest
from httpx import AsyncClient

from app.core.config import settings


async def _create_post(client: AsyncClient, **overrides) -> int:
    body = {"title": "T", "content": "C", "author": "Alice", "username": "alice"}
    body.update(overrides)
    resp = await client.post("/api/posts", json=body)
    assert resp.status_code == 201
    return resp.json()["id"]


@pytest.mark.asyncio
async def test_submit_approve_publishes_to_feed(async_client: AsyncClient):
    post_id = await _create_post(async_client)

    resp = await async_client.get(f"/api/posts/{post_id}")
    assert resp.status_code == 200
    assert resp.json()["status"] == "pending"

    resp = await async_client.put(f"/api/posts/{post_id}/approve")
    assert resp.status_code == 200
    assert resp.json()["message"] == "Post approved."

    feed = (await async_client.get("/api/posts/approved")).json()
    assert [p["id"] for p in feed] == [post_id]
    assert feed[0]["status"] == "approved"

    pending = (await async_client.get("/api/posts/pending")).json()
    assert pending == []


@pytest.mark.asyncio
async def test_post_payload_uses_camel_case(async_client: AsyncClient):
    post_id = await _create_post(
        async_client, imageUrl="https://cdn.example.com/p.jpg", category="food"
    )

    data = (await async_client.get(f"/api/posts/{post_id}")).json()
    assert data["imageUrl"] == "https://cdn.example.com/p.jpg"
    assert data["category"] == "food"
    assert data["author"] == "Alice"
    assert data["username"] == "alice"
    assert "createdAt" in data
    assert "image_url" not in data


@pytest.mark.asyncio
async def test_submit_defaults_category(async_client: AsyncClient):
    post_id = await _create_post(async_client)
    data = (await async_client.get(f"/api/posts/{post_id}")).json()
    assert data["category"] == "uncategorized"
    assert data["imageUrl"] is None


@pytest.mark.asyncio
async def test_submit_missing_fields_is_400(async_client: AsyncClient):
    resp = await async_client.post("/api/posts", json={"title": "T", "content": "C"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Missing fields."


@pytest.mark.asyncio
async def test_list_all_includes_every_status(async_client: AsyncClient):
    first = await _create_post(async_client, title="first")
    second = await _create_post(async_client, title="second")
    third = await _create_post(async_client, title="third")
    await async_client.put(f"/api/posts/{first}/approve")
    await async_client.put(f"/api/posts/{second}/reject")

    data = (await async_client.get("/api/posts")).json()
    assert [p["id"] for p in data] == [third, second, first]
    assert [p["status"] for p in data] == ["pending", "rejected", "approved"]


@pytest.mark.asyncio
async def test_approve_then_reject(async_client: AsyncClient):
    post_id = await _create_post(async_client)

    assert (await async_client.put(f"/api/posts/{post_id}/approve")).status_code == 200
    resp = await async_client.put(f"/api/posts/{post_id}/reject")
    assert resp.status_code == 200
    assert resp.json()["message"] == "Post rejected."

    assert (await async_client.get(f"/api/posts/{post_id}")).json()["status"] == "rejected"
    assert (await async_client.get("/api/posts/approved")).json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, path",
    [
        ("GET", "/api/posts/9999"),
        ("PUT", "/api/posts/9999/approve"),
        ("PUT", "/api/posts/9999/reject"),
        ("DELETE", "/api/posts/9999"),
        ("GET", "/api/posts/not-a-number"),
        ("PUT", "/api/posts/abc/approve"),
    ],
)
async def test_unknown_post_is_404(async_client: AsyncClient, method: str, path: str):
    resp = await async_client.request(method, path)
    assert resp.status_code == 404
    assert resp.json()["message"] == "Post not found."


@pytest.mark.asyncio
async def test_delete_post(async_client: AsyncClient):
    post_id = await _create_post(async_client)

    resp = await async_client.delete(f"/api/posts/{post_id}")
    assert resp.status_code == 200
    assert resp.json()["message"] == "Post deleted."

    assert (await async_client.get(f"/api/posts/{post_id}")).status_code == 404
    assert (await async_client.delete(f"/api/posts/{post_id}")).status_code == 404


@pytest.mark.asyncio
async def test_strict_moderation_rejects_non_pending(async_client: AsyncClient):
    post_id = await _create_post(async_client)

    with patch.object(settings, "STRICT_MODERATION", True):
        assert (await async_client.put(f"/api/posts/{post_id}/reject")).status_code == 200
        resp = await async_client.put(f"/api/posts/{post_id}/approve")
        assert resp.status_code == 409

    # Default policy overwrites again
    assert (await async_client.put(f"/api/posts/{post_id}/approve")).status_code == 200
