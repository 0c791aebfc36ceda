"""
Post store — submission, listing and moderation of posts.

Every mutation reads the affected-row count back from the database: zero
rows means the id does not exist, anything else is success. Approve and
reject overwrite the status unconditionally unless the store is built with
``strict=True``, in which case only pending posts can be moderated.
"""

from __future__ import annotations

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import InvalidTransitionError, NotFoundError, ValidationError
from app.models.post import (
    DEFAULT_CATEGORY,
    STATUS_APPROVED,
    STATUS_PENDING,
    STATUS_REJECTED,
    Post,
)

logger = logging.getLogger(__name__)

# Statuses that may be listed on their own; rejected posts only show up in list_all().
LISTABLE_STATUSES = (STATUS_PENDING, STATUS_APPROVED)

_NOT_FOUND = "Post not found."


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


class PostStore:
    def __init__(self, db: AsyncSession, strict: bool = False) -> None:
        self.db = db
        self.strict = strict

    # ── Submission ──────────────────────────────────────────────────
    async def submit(
        self,
        title: str | None,
        content: str | None,
        author: str | None,
        username: str | None,
        image_url: str | None = None,
        category: str | None = None,
    ) -> int:
        if any(_blank(v) for v in (title, content, author, username)):
            raise ValidationError("Missing fields.")

        post = Post(
            title=title,
            content=content,
            author=author,
            username=username,
            image_url=image_url or None,
            category=DEFAULT_CATEGORY if _blank(category) else category,
            status=STATUS_PENDING,
        )
        self.db.add(post)
        await self.db.commit()
        logger.info("Post %d submitted by %s", post.id, username)
        return post.id

    # ── Retrieval ───────────────────────────────────────────────────
    async def list_all(self) -> list[Post]:
        result = await self.db.execute(
            select(Post).order_by(Post.created_at.desc(), Post.id.desc())
        )
        return list(result.scalars().all())

    async def list_by_status(self, status: str) -> list[Post]:
        if status not in LISTABLE_STATUSES:
            raise ValidationError(f"Cannot list posts with status '{status}'.")
        result = await self.db.execute(
            select(Post)
            .where(Post.status == status)
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        return list(result.scalars().all())

    async def get(self, post_id: int) -> Post:
        result = await self.db.execute(select(Post).where(Post.id == post_id))
        post = result.scalar_one_or_none()
        if post is None:
            raise NotFoundError(_NOT_FOUND)
        return post

    # ── Moderation ──────────────────────────────────────────────────
    async def approve(self, post_id: int) -> None:
        await self._set_status(post_id, STATUS_APPROVED)

    async def reject(self, post_id: int) -> None:
        await self._set_status(post_id, STATUS_REJECTED)

    async def delete(self, post_id: int) -> None:
        result = await self.db.execute(delete(Post).where(Post.id == post_id))
        await self.db.commit()
        if result.rowcount == 0:
            raise NotFoundError(_NOT_FOUND)
        logger.info("Post %d deleted", post_id)

    async def _set_status(self, post_id: int, status: str) -> None:
        stmt = update(Post).where(Post.id == post_id).values(status=status)
        if self.strict:
            stmt = stmt.where(Post.status == STATUS_PENDING)

        result = await self.db.execute(stmt)
        await self.db.commit()

        if result.rowcount == 0:
            if self.strict and await self._exists(post_id):
                raise InvalidTransitionError(
                    f"Post {post_id} is no longer pending and cannot be {status}."
                )
            raise NotFoundError(_NOT_FOUND)
        logger.info("Post %d %s", post_id, status)

    async def _exists(self, post_id: int) -> bool:
        result = await self.db.execute(select(Post.id).where(Post.id == post_id))
        return result.scalar_one_or_none() is not None
