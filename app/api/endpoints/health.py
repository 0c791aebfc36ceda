"""
Health check endpoint.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.schemas.common import HealthResponse

router = APIRouter(tags=["health"])
logger = logging.getLogger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health(db: AsyncSession = Depends(get_db)) -> HealthResponse:
    """Public health check — database connectivity."""
    result = HealthResponse(status="degraded", db=False)

    try:
        await db.execute(select(1))
        result.db = True
        result.status = "ok"
    except SQLAlchemyError as e:
        logger.error("Health check DB failure: %s", e)

    return result
