"""Pydantic schemas for signup / login."""

from __future__ import annotations

from app.schemas.common import CamelModel


class SignupRequest(CamelModel):
    full_name: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(CamelModel):
    email: str | None = None
    password: str | None = None


class UserSummary(CamelModel):
    id: int
    full_name: str
    email: str


class LoginResponse(CamelModel):
    message: str
    user: UserSummary
