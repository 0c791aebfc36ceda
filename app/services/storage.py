"""S3-compatible object storage client used to sign direct browser uploads.

Wraps a boto3 S3 client for one bucket. The instance is built once at
startup and shared by requests; boto3 clients are thread-safe and signing
is a local computation, so no network round-trip happens here.
"""

from __future__ import annotations

import boto3
from botocore.client import Config as BotoConfig

from app.core.config import Settings


class ObjectStorage:
    """Thin client around boto3 S3 for presigned PUT URLs."""

    def __init__(
        self,
        bucket: str | None,
        region: str,
        access_key_id: str | None = None,
        secret_access_key: str | None = None,
        endpoint_url: str | None = None,
        client=None,
    ) -> None:
        self.bucket = bucket
        self.region = region
        self.endpoint_url = endpoint_url
        self._client = client or boto3.client(
            "s3",
            region_name=region,
            endpoint_url=endpoint_url,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
            config=BotoConfig(signature_version="s3v4"),
        )

    @classmethod
    def from_settings(cls, s: Settings) -> "ObjectStorage":
        return cls(
            bucket=s.S3_BUCKET_NAME,
            region=s.AWS_REGION,
            access_key_id=s.AWS_ACCESS_KEY_ID,
            secret_access_key=s.AWS_SECRET_ACCESS_KEY,
            endpoint_url=s.S3_ENDPOINT_URL,
        )

    def presign_put(self, key: str, content_type: str, expires: int) -> str:
        """Generate a time-limited pre-signed PUT URL for ``key``.

        Args:
            key: Object key inside the bucket.
            content_type: MIME type the uploader must send.
            expires: Validity window in seconds.

        Returns:
            The signed URL. botocore errors propagate to the caller.
        """
        return self._client.generate_presigned_url(
            "put_object",
            Params={"Bucket": self.bucket, "Key": key, "ContentType": content_type},
            ExpiresIn=expires,
        )

    def public_url(self, key: str) -> str:
        """Return the unsigned retrieval URL of ``key``."""
        if self.endpoint_url:
            return f"{self.endpoint_url.rstrip('/')}/{self.bucket}/{key}"
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{key}"
