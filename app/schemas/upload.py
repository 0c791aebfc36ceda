"""Pydantic schemas for pre-signed upload grants."""

from __future__ import annotations

from app.schemas.common import CamelModel


class UploadGrantRequest(CamelModel):
    file_name: str | None = None
    file_type: str | None = None


class UploadGrant(CamelModel):
    upload_url: str
    file_url: str
