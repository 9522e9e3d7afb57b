"""
Pydantic schemas for the upstream notebook platform responses.

Every response body passes through one of these models before the rest of
the application sees it; a mismatch surfaces as UpstreamError.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class WorkspaceObject(BaseModel):
    """An item in the remote workspace (notebook, directory, file, ...)"""
    model_config = ConfigDict(extra="allow")

    path: str
    object_type: str
    object_id: Optional[int] = None
    language: Optional[str] = None


class WorkspaceListResponse(BaseModel):
    """Body of GET /api/2.0/workspace/list"""
    objects: List[WorkspaceObject]


class RunSubmitResponse(BaseModel):
    """Body of POST /api/2.1/jobs/runs/submit"""
    run_id: int


class RunState(BaseModel):
    """Lifecycle information of one submitted run"""
    model_config = ConfigDict(extra="allow")

    life_cycle_state: str
    result_state: Optional[str] = None
    state_message: Optional[str] = None


class RunGetResponse(BaseModel):
    """Body of GET /api/2.1/jobs/runs/get (only the fields we read)"""
    model_config = ConfigDict(extra="ignore")

    run_id: Optional[int] = None
    state: RunState
