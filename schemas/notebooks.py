"""
Schemas for notebook-run bookkeeping rows and the dashboard built from them
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field, field_validator

from schemas.common import APIModel

StatusFlag = Literal[0, 1]


class NotebookCreate(APIModel):
    file_name: str = Field(..., alias="fileName", min_length=1, max_length=500)
    filesize: Optional[int] = Field(None, ge=0)
    status: StatusFlag = 0
    total_rows: Optional[int] = Field(None, ge=0)
    task_id: Optional[str] = Field(None, alias="taskId", max_length=100)


class NotebookUpdate(APIModel):
    file_name: Optional[str] = Field(None, alias="fileName", min_length=1, max_length=500)
    filesize: Optional[int] = Field(None, ge=0)
    status: Optional[StatusFlag] = None
    total_rows: Optional[int] = Field(None, ge=0)
    task_id: Optional[str] = Field(None, alias="taskId", max_length=100)

    @field_validator("file_name", "status")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v


class NotebookResponse(APIModel):
    id: int
    file_name: str = Field(..., alias="fileName")
    filesize: Optional[int] = None
    status: int
    total_rows: Optional[int] = None
    task_id: Optional[str] = Field(None, alias="taskId")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")


class RecentUpload(APIModel):
    id: int
    file_name: str = Field(..., alias="fileName")
    status: int
    total_rows: Optional[int] = None
    created_at: datetime = Field(..., alias="createdAt")
    time_ago: str = Field(..., alias="timeAgo")


class DashboardMetrics(APIModel):
    """Aggregate counters over every bookkeeping row"""
    total_uploads: int = Field(..., alias="totalUploads")
    successful_uploads: int = Field(..., alias="successfulUploads")
    failed_uploads: int = Field(..., alias="failedUploads")
    data_processed: int = Field(..., alias="dataProcessed")
    recent_uploads: List[RecentUpload] = Field(default_factory=list, alias="recentUploads")
