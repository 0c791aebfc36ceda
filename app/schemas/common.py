"""Shared Pydantic bases and small response bodies."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serialises as camelCase (what the browser clients use), accepts both."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    message: str
    success: bool = True


class CreatedResponse(MessageResponse):
    id: int


class HealthResponse(BaseModel):
    status: str = "ok"
    db: bool = False
