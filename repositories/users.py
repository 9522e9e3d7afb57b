from typing import Any, Dict, Optional

from sqlalchemy import select

from core.exceptions import ConflictError
from core.security import hash_password
from models.user import User
from repositories.base import CrudRepository


class UserRepository(CrudRepository[User]):
    """
    Users table access.

    Every write that carries a `password` stores its hash, so registration,
    admin updates and password changes share one hashing path.
    """

    model = User

    async def find_by_email(self, email: str) -> Optional[User]:
        result = await self._execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def _ensure_email_free(self, email: str, exclude_id: Optional[int] = None):
        existing = await self.find_by_email(email)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError(
                "User with this email already exists",
                context={"entity": "User", "operation": "create" if exclude_id is None else "update"}
            )

    @staticmethod
    def _hash_password_field(fields: Dict[str, Any]) -> Dict[str, Any]:
        fields = dict(fields)
        if fields.get("password") is not None:
            fields["password"] = hash_password(fields["password"])
        return fields

    async def create(self, fields: Dict[str, Any]) -> User:
        fields = self._hash_password_field(fields)
        if not fields.get("full_name"):
            fields["full_name"] = fields["username"]

        # The unique index on email still rejects a concurrent duplicate
        await self._ensure_email_free(fields["email"])
        return await super().create(fields)

    async def update(self, record_id: int, fields: Dict[str, Any]) -> User:
        if "email" in fields:
            await self._ensure_email_free(fields["email"], exclude_id=record_id)
        return await super().update(record_id, self._hash_password_field(fields))

    async def set_password(self, user_id: int, new_password: str) -> User:
        return await self.update(user_id, {"password": new_password})
