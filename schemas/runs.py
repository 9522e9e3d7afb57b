"""
Schemas for the notebook run endpoints
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from schemas.common import APIModel
from upstream.schemas import WorkspaceObject


class RunNotebookRequest(APIModel):
    """
    Body of POST /run-notebook.

    `source` is matched case-insensitively against notebook paths; `fileName`
    names the file the run processes and is recorded for the dashboard.
    """
    file_name: Optional[str] = Field(None, alias="fileName", max_length=500)
    source: Optional[str] = None


class RunNotebookResponse(BaseModel):
    message: str
    run_id: int
    notebook_name: str
    notebooks: List[WorkspaceObject]


class NotebookListResponse(BaseModel):
    message: str
    notebooks: List[WorkspaceObject]


class RunStatusResponse(APIModel):
    run_id: str = Field(..., alias="runId")
    run_status: Dict[str, Any] = Field(..., alias="runStatus")
    status: str
    message: str = ""
    result: str = "N/A"
    progress: int = Field(..., ge=0, le=100)
