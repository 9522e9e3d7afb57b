from sqlalchemy import delete, func, select

from models.auth_token import AuthToken
from repositories.base import CrudRepository


class AuthTokenRepository(CrudRepository[AuthToken]):
    model = AuthToken

    async def add(self, user_id: int, token: str) -> AuthToken:
        return await self.create({"user_id": user_id, "token": token})

    async def exists(self, token: str) -> bool:
        result = await self._execute(
            select(func.count()).select_from(AuthToken).where(AuthToken.token == token)
        )
        return result.scalar() > 0

    async def delete_by_token(self, token: str) -> int:
        """Remove every row holding `token`; returns how many were removed"""
        result = await self._execute(delete(AuthToken).where(AuthToken.token == token))
        await self._commit("delete")
        return result.rowcount or 0
