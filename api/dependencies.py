"""
FastAPI dependencies resolving the application context per request
"""

from typing import AsyncGenerator, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from core.context import AppContext
from core.exceptions import UnauthorizedError
from models.user import User
from services.auth import AuthService

bearer_scheme = HTTPBearer(auto_error=False)


def get_context(request: Request) -> AppContext:
    return request.app.state.context


async def get_db(context: AppContext = Depends(get_context)) -> AsyncGenerator[AsyncSession, None]:
    """Get database session"""
    async with context.session_maker() as session:
        yield session


def get_auth_service(
    context: AppContext = Depends(get_context),
    db: AsyncSession = Depends(get_db)
) -> AuthService:
    return AuthService(db, context.token_signer())


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> str:
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Authorization token missing")
    return credentials.credentials


async def get_current_user(
    token: str = Depends(get_bearer_token),
    auth: AuthService = Depends(get_auth_service)
) -> User:
    return await auth.authenticate(token)
