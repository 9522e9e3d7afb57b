"""
Liveness and health check endpoints
"""

from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_context, get_db
from core.context import AppContext
import logging

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Health"])


class HealthCheckResponse(BaseModel):
    """Health check response model"""
    status: str = Field(..., description="Overall system status: healthy, degraded, unhealthy")
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    database_connected: bool
    missing_configuration: List[str] = Field(default_factory=list)


@router.get("/", response_class=PlainTextResponse)
async def root():
    """Liveness probe"""
    return "Notebook runner API is running"


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(
    context: AppContext = Depends(get_context),
    db: AsyncSession = Depends(get_db)
):
    """
    Health check endpoint.

    Returns:
    - Database connectivity status
    - Names of required settings that are not configured
    """
    db_connected = False

    try:
        await db.execute(text("SELECT 1"))
        db_connected = True
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Database connection failed: {str(e)}")

    missing = context.settings.missing_required_settings()

    if not db_connected:
        status = "unhealthy"
    elif missing:
        status = "degraded"
    else:
        status = "healthy"

    return HealthCheckResponse(
        status=status,
        timestamp=datetime.utcnow(),
        database_connected=db_connected,
        missing_configuration=missing
    )
