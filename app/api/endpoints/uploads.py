"""
Upload endpoint — pre-signed S3 PUT URLs for post images.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import get_upload_authorizer
from app.schemas.upload import UploadGrant, UploadGrantRequest
from app.services.uploads import UploadAuthorizer

router = APIRouter(tags=["uploads"])


@router.post("/s3-presigned-url", response_model=UploadGrant)
async def create_presigned_url(
    body: UploadGrantRequest,
    authorizer: UploadAuthorizer = Depends(get_upload_authorizer),
) -> UploadGrant:
    """Return ``uploadUrl`` (PUT, 5 minutes, bound to ``fileType``) and the object's ``fileUrl``."""
    return authorizer.create_upload_grant(body.file_name, body.file_type)
