"""
Generic async CRUD repository over one ORM model
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import ConflictError, DatabaseError, NotFoundError
from models.base import Base
import logging

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class CrudRepository(Generic[ModelT]):
    """
    Create/read/update/delete for a single table.

    Responsibilities:
    - Each write commits its own unit of work
    - Missing rows raise NotFoundError
    - IntegrityError becomes ConflictError, any other driver error DatabaseError
    """

    model: Type[ModelT]

    def __init__(self, db_session: AsyncSession):
        self.db = db_session

    @property
    def entity(self) -> str:
        return self.model.__name__

    async def _commit(self, operation: str):
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"{operation} {self.entity} violated a constraint: {e.orig}")
            raise ConflictError(
                f"{self.entity} conflicts with an existing record",
                context={"operation": operation, "entity": self.entity},
                original_exception=e
            )
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"{operation} {self.entity} failed: {e}")
            raise DatabaseError(
                "Database operation failed",
                context={"operation": operation, "entity": self.entity},
                original_exception=e
            )

    async def _execute(self, statement):
        try:
            return await self.db.execute(statement)
        except SQLAlchemyError as e:
            logger.error(f"Query on {self.entity} failed: {e}")
            raise DatabaseError(
                "Database operation failed",
                context={"operation": "query", "entity": self.entity},
                original_exception=e
            )

    async def list(self) -> List[ModelT]:
        result = await self._execute(select(self.model).order_by(self.model.id))
        return list(result.scalars().all())

    async def find(self, record_id: int) -> Optional[ModelT]:
        result = await self._execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def get(self, record_id: int) -> ModelT:
        record = await self.find(record_id)
        if record is None:
            raise NotFoundError(
                f"{self.entity} not found",
                context={"entity": self.entity, "lookup": record_id}
            )
        return record

    async def create(self, fields: Dict[str, Any]) -> ModelT:
        record = self.model(**fields)
        self.db.add(record)
        await self._commit("create")
        await self.db.refresh(record)

        logger.info(f"Created {self.entity} id={record.id}")
        return record

    async def update(self, record_id: int, fields: Dict[str, Any]) -> ModelT:
        """Apply only the given fields; everything else keeps its stored value"""
        record = await self.get(record_id)
        for name, value in fields.items():
            setattr(record, name, value)

        await self._commit("update")
        await self.db.refresh(record)

        logger.info(f"Updated {self.entity} id={record_id} fields={sorted(fields)}")
        return record

    async def delete(self, record_id: int):
        record = await self.get(record_id)
        await self.db.delete(record)
        await self._commit("delete")

        logger.info(f"Deleted {self.entity} id={record_id}")
