"""
Pre-signed S3 PUT URLs for post images.
"""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Callable

from botocore.exceptions import BotoCoreError, ClientError

from app.core.config import settings
from app.core.exceptions import StorageAuthError, ValidationError
from app.schemas.upload import UploadGrant
from app.services.storage import ObjectStorage

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")
_UNSAFE_KEY_CHARS_RE = re.compile(r"[^A-Za-z0-9._-]")


def sanitize_file_name(file_name: str) -> str:
    """Collapse whitespace runs to ``_`` and drop anything outside ``[A-Za-z0-9._-]``."""
    return _UNSAFE_KEY_CHARS_RE.sub("", _WHITESPACE_RE.sub("_", file_name))


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _epoch_millis() -> int:
    return int(time.time() * 1000)


class UploadAuthorizer:
    def __init__(
        self,
        storage: ObjectStorage,
        expires: int = settings.UPLOAD_URL_EXPIRATION_SECONDS,
        key_prefix: str = settings.UPLOAD_KEY_PREFIX,
        clock: Callable[[], int] = _epoch_millis,
    ) -> None:
        self.storage = storage
        self.expires = expires
        self.key_prefix = key_prefix
        self.clock = clock

    def object_key(self, file_name: str) -> str:
        # Millisecond prefix keeps keys distinct unless two identical names land in the same ms.
        return f"{self.key_prefix}/{self.clock()}-{sanitize_file_name(file_name)}"

    def create_upload_grant(self, file_name: str | None, file_type: str | None) -> UploadGrant:
        if _blank(file_name) or _blank(file_type):
            raise ValidationError("Missing file info.")

        if not self.storage.bucket:
            raise StorageAuthError(
                "S3 URL generation failed. Details: S3 bucket is not configured"
            )

        key = self.object_key(file_name)
        try:
            upload_url = self.storage.presign_put(key, file_type, self.expires)
        except (BotoCoreError, ClientError) as exc:
            raise StorageAuthError(f"S3 URL generation failed. Details: {exc}") from exc

        logger.info("Issued upload grant for %s (%s, %ds)", key, file_type, self.expires)
        return UploadGrant(upload_url=upload_url, file_url=self.storage.public_url(key))
