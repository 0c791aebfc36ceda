"""
FastAPI dependencies — database session, storage client and the
per-request service objects built on top of them.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.exceptions import NotFoundError
from app.db.session import async_session_factory
from app.services.credentials import CredentialStore
from app.services.posts import PostStore
from app.services.storage import ObjectStorage
from app.services.uploads import UploadAuthorizer


# ── Database session ────────────────────────────────────────────────
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


# ── Object storage ──────────────────────────────────────────────────
def get_storage(request: Request) -> ObjectStorage:
    """Return the storage client opened by the lifespan, creating it on first use."""
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        storage = ObjectStorage.from_settings(settings)
        request.app.state.storage = storage
    return storage


# ── Services ────────────────────────────────────────────────────────
async def get_credential_store(db: AsyncSession = Depends(get_db)) -> CredentialStore:
    return CredentialStore(db)


async def get_post_store(db: AsyncSession = Depends(get_db)) -> PostStore:
    return PostStore(db, strict=settings.STRICT_MODERATION)


def get_upload_authorizer(storage: ObjectStorage = Depends(get_storage)) -> UploadAuthorizer:
    return UploadAuthorizer(
        storage,
        expires=settings.UPLOAD_URL_EXPIRATION_SECONDS,
        key_prefix=settings.UPLOAD_KEY_PREFIX,
    )


# ── Path parameters ─────────────────────────────────────────────────
_MAX_POST_ID = 2**63 - 1


def post_id_path(post_id: str) -> int:
    """Parse the ``{post_id}`` segment; a non-numeric id names no post."""
    if not (post_id.isascii() and post_id.isdigit()) or int(post_id) > _MAX_POST_ID:
        raise NotFoundError("Post not found.")
    return int(post_id)
