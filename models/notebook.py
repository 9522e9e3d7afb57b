from sqlalchemy import Column, Integer, BigInteger, String, Index
from models.base import Base, TimestampMixin

NOTEBOOK_STATUS_FAILED = 0
NOTEBOOK_STATUS_SUCCESS = 1


class Notebook(TimestampMixin, Base):
    """
    Bookkeeping row for an uploaded/processed file.

    Not the remote notebook object itself: task_id holds the upstream run id
    the file was processed by, status is 1 once that run succeeded.
    """
    __tablename__ = "notebooks"

    id = Column(Integer, primary_key=True, autoincrement=True)

    file_name = Column(String(500), nullable=False)
    filesize = Column(BigInteger, nullable=True)
    status = Column(Integer, nullable=False, default=NOTEBOOK_STATUS_FAILED)
    total_rows = Column(Integer, nullable=True)
    task_id = Column(String(100), nullable=True, index=True)

    __table_args__ = (
        Index("idx_notebooks_status", "status"),
    )
