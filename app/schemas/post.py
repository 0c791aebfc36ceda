"""Pydantic schemas for posts."""

from __future__ import annotations

from datetime import datetime

from app.schemas.common import CamelModel


class PostCreate(CamelModel):
    title: str | None = None
    content: str | None = None
    author: str | None = None
    username: str | None = None
    image_url: str | None = None
    category: str | None = None


class PostRead(CamelModel):
    id: int
    title: str
    content: str
    author: str
    username: str | None
    image_url: str | None
    category: str
    status: str
    created_at: datetime | None
