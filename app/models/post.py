"""
Post model — user submissions and their moderation status.

Status moves pending -> approved | rejected; posts are removed by hard delete.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Index, Integer, String, Text

from app.db.base import Base

STATUS_PENDING = "pending"
STATUS_APPROVED = "approved"
STATUS_REJECTED = "rejected"

POST_STATUSES = (STATUS_PENDING, STATUS_APPROVED, STATUS_REJECTED)
DEFAULT_CATEGORY = "uncategorized"


class Post(Base):
    __tablename__ = "posts"
    __table_args__ = (Index("ix_posts_status_created_at", "status", "created_at"),)

    id: int = Column(Integer, primary_key=True, index=True)  # type: ignore[assignment]
    title: str = Column(String(300), nullable=False)  # type: ignore[assignment]
    content: str = Column(Text, nullable=False)  # type: ignore[assignment]
    author: str = Column(String(200), nullable=False)  # type: ignore[assignment]
    username: str | None = Column(String(200), nullable=True)  # type: ignore[assignment]
    image_url: str | None = Column(String(1024), nullable=True)  # type: ignore[assignment]
    category: str = Column(  # type: ignore[assignment]
        String(100),
        nullable=False,
        default=DEFAULT_CATEGORY,
        server_default=DEFAULT_CATEGORY,
    )
    status: str = Column(  # type: ignore[assignment]
        String(20),
        nullable=False,
        default=STATUS_PENDING,
        server_default=STATUS_PENDING,
    )  # pending | approved | rejected
    created_at: datetime = Column(  # type: ignore[assignment]
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )
