"""
Post endpoints — submission, public feed and moderation.

Static paths (``/posts/approved``, ``/posts/pending``) are declared before
``/posts/{post_id}`` so they are not captured as ids.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import get_post_store, post_id_path
from app.models.post import STATUS_APPROVED, STATUS_PENDING, Post
from app.schemas.common import CreatedResponse, MessageResponse
from app.schemas.post import PostCreate, PostRead
from app.services.posts import PostStore

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post("", response_model=CreatedResponse, status_code=201)
async def create_post(
    body: PostCreate,
    store: PostStore = Depends(get_post_store),
) -> CreatedResponse:
    """Submit a post; it waits in ``pending`` until a moderator acts."""
    post_id = await store.submit(
        title=body.title,
        content=body.content,
        author=body.author,
        username=body.username,
        image_url=body.image_url,
        category=body.category,
    )
    return CreatedResponse(message="Post created successfully.", id=post_id)


@router.get("", response_model=list[PostRead])
async def list_posts(store: PostStore = Depends(get_post_store)) -> list[Post]:
    return await store.list_all()


@router.get("/approved", response_model=list[PostRead])
async def list_approved_posts(store: PostStore = Depends(get_post_store)) -> list[Post]:
    """Public feed."""
    return await store.list_by_status(STATUS_APPROVED)


@router.get("/pending", response_model=list[PostRead])
async def list_pending_posts(store: PostStore = Depends(get_post_store)) -> list[Post]:
    """Moderation queue."""
    return await store.list_by_status(STATUS_PENDING)


@router.get("/{post_id}", response_model=PostRead)
async def get_post(
    post_id: int = Depends(post_id_path),
    store: PostStore = Depends(get_post_store),
) -> Post:
    return await store.get(post_id)


@router.put("/{post_id}/approve", response_model=MessageResponse)
async def approve_post(
    post_id: int = Depends(post_id_path),
    store: PostStore = Depends(get_post_store),
) -> MessageResponse:
    await store.approve(post_id)
    return MessageResponse(message="Post approved.")


@router.put("/{post_id}/reject", response_model=MessageResponse)
async def reject_post(
    post_id: int = Depends(post_id_path),
    store: PostStore = Depends(get_post_store),
) -> MessageResponse:
    await store.reject(post_id)
    return MessageResponse(message="Post rejected.")


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: int = Depends(post_id_path),
    store: PostStore = Depends(get_post_store),
) -> MessageResponse:
    """Hard-delete a post in any status."""
    await store.delete(post_id)
    return MessageResponse(message="Post deleted.")
