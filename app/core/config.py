"""
Centralised application settings loaded from environment / .env file.

Uses pydantic-settings so every value can be overridden via env vars
or the .env file at the project root.
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Project ──────────────────────────────────────────────────────
    PROJECT_NAME: str = "Blog Moderation Backend"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # ── Database (async SQLite via aiosqlite, asyncpg for PostgreSQL) ─
    DATABASE_URL: str = "sqlite+aiosqlite:///./blog.sqlite"

    # ── Passwords ────────────────────────────────────────────────────
    BCRYPT_ROUNDS: int = 10

    # ── Rate limiting ────────────────────────────────────────────────
    RATE_LIMIT_ENABLED: bool = True
    SIGNUP_RATE_LIMIT: str = "10/minute"
    LOGIN_RATE_LIMIT: str = "5/minute"

    # ── CORS ─────────────────────────────────────────────────────────
    CORS_ORIGINS: list[str] = ["*"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _parse_cors(cls, v: object) -> list[str]:
        if isinstance(v, str) and not v.lstrip().startswith("["):
            return [o.strip() for o in v.split(",") if o.strip()]
        return v  # type: ignore[return-value]

    # ── Object storage (S3) ──────────────────────────────────────────
    AWS_ACCESS_KEY_ID: str | None = None
    AWS_SECRET_ACCESS_KEY: str | None = None
    AWS_REGION: str = "us-east-1"
    S3_BUCKET_NAME: str | None = None
    S3_ENDPOINT_URL: str | None = None  # MinIO / other S3-compatible stores
    UPLOAD_URL_EXPIRATION_SECONDS: int = 300
    UPLOAD_KEY_PREFIX: str = "posts"

    # ── Moderation ───────────────────────────────────────────────────
    # When on, approve/reject only move posts that are still pending.
    STRICT_MODERATION: bool = False

    # ── Logging ──────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }


settings = Settings()

if not settings.S3_BUCKET_NAME:
    import logging

    logging.getLogger("app.core.config").warning(
        "S3_BUCKET_NAME is not set; /api/s3-presigned-url will fail until "
        "it is configured in the environment or .env file."
    )
