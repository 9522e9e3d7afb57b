"""
Notebook-run bookkeeping CRUD and the dashboard metrics built from it
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_db
from repositories.notebooks import NotebookRepository
from schemas.notebooks import DashboardMetrics, NotebookCreate, NotebookResponse, NotebookUpdate
import logging

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Notebooks"])


@router.get("/dashboard/metrics", response_model=DashboardMetrics)
async def dashboard_metrics(request: Request, db: AsyncSession = Depends(get_db)):
    """
    Aggregate counters for the dashboard:
    - total / successful / failed uploads
    - total rows processed
    - the five most recent uploads with a relative time label
    """
    request_id = getattr(request.state, "request_id", "-")
    metrics = await NotebookRepository(db).dashboard_metrics()

    logger.info(
        f"[{request_id}] Dashboard: {metrics.total_uploads} uploads, "
        f"{metrics.data_processed} rows processed"
    )
    return metrics


@router.post("/notebooks", response_model=NotebookResponse, status_code=201)
async def create_notebook(body: NotebookCreate, db: AsyncSession = Depends(get_db)):
    return await NotebookRepository(db).create(body.model_dump())


@router.get("/notebooks", response_model=List[NotebookResponse])
async def list_notebook_records(db: AsyncSession = Depends(get_db)):
    return await NotebookRepository(db).list()


@router.get("/notebooks/{notebook_id}", response_model=NotebookResponse)
async def get_notebook(notebook_id: int, db: AsyncSession = Depends(get_db)):
    return await NotebookRepository(db).get(notebook_id)


@router.put("/notebooks/{notebook_id}", response_model=NotebookResponse)
async def update_notebook(notebook_id: int, body: NotebookUpdate, db: AsyncSession = Depends(get_db)):
    return await NotebookRepository(db).update(notebook_id, body.model_dump(exclude_unset=True))


@router.delete("/notebooks/{notebook_id}", status_code=204)
async def delete_notebook(notebook_id: int, db: AsyncSession = Depends(get_db)):
    await NotebookRepository(db).delete(notebook_id)
    return Response(status_code=204)
