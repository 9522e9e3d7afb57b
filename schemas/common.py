"""
Schemas shared by every router
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class APIModel(BaseModel):
    """Base for request/response bodies: camelCase aliases, ORM-readable"""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class ErrorResponse(BaseModel):
    """Standard error response"""
    error: str
    detail: Optional[str] = None
    timestamp: datetime = Field(default_factory=datetime.utcnow)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "User not found",
                "detail": None,
                "timestamp": "2024-01-15T10:30:00Z"
            }
        }
    )


class MessageResponse(BaseModel):
    message: str
