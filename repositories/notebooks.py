"""
Notebook-run bookkeeping rows and the dashboard aggregates built on them
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import func, select, update

from core.timeutils import time_ago
from models.notebook import Notebook, NOTEBOOK_STATUS_FAILED, NOTEBOOK_STATUS_SUCCESS
from repositories.base import CrudRepository
from schemas.notebooks import DashboardMetrics, RecentUpload
import logging

logger = logging.getLogger(__name__)

RECENT_UPLOADS_LIMIT = 5


class NotebookRepository(CrudRepository[Notebook]):
    model = Notebook

    async def record_run(self, file_name: str, task_id: str) -> Notebook:
        """Create the bookkeeping row for a freshly submitted run"""
        return await self.create({
            "file_name": file_name,
            "task_id": task_id,
            "status": NOTEBOOK_STATUS_FAILED,
        })

    async def mark_task_status(self, task_id: str, status: int) -> int:
        """Set the status of the rows tracking `task_id`; returns rows changed"""
        result = await self._execute(
            update(Notebook)
            .where(Notebook.task_id == task_id, Notebook.status != status)
            .values(status=status, updated_at=datetime.utcnow())
        )
        await self._commit("update")

        changed = result.rowcount or 0
        if changed:
            logger.info(f"Marked {changed} notebook row(s) for task {task_id} with status={status}")
        return changed

    async def dashboard_metrics(self, now: Optional[datetime] = None) -> DashboardMetrics:
        """
        Aggregate counters over all rows.

        Returns:
        - total rows, rows with status=1, rows with status=0
        - sum of total_rows (0 when the table is empty)
        - the most recently created rows with a relative time label
        """
        totals = await self._execute(
            select(
                func.count(Notebook.id),
                func.coalesce(func.sum(Notebook.total_rows), 0),
            )
        )
        total_uploads, data_processed = totals.one()

        by_status = await self._execute(
            select(Notebook.status, func.count(Notebook.id)).group_by(Notebook.status)
        )
        status_counts = {status: count for status, count in by_status.all()}

        recent = await self._execute(
            select(Notebook)
            .order_by(Notebook.created_at.desc(), Notebook.id.desc())
            .limit(RECENT_UPLOADS_LIMIT)
        )

        now = now or datetime.utcnow()
        recent_uploads = [
            RecentUpload(
                id=row.id,
                file_name=row.file_name,
                status=row.status,
                total_rows=row.total_rows,
                created_at=row.created_at,
                time_ago=time_ago(row.created_at, now),
            )
            for row in recent.scalars().all()
        ]

        return DashboardMetrics(
            total_uploads=total_uploads or 0,
            successful_uploads=status_counts.get(NOTEBOOK_STATUS_SUCCESS, 0),
            failed_uploads=status_counts.get(NOTEBOOK_STATUS_FAILED, 0),
            data_processed=int(data_processed or 0),
            recent_uploads=recent_uploads,
        )
