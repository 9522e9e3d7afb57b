"""
Password authentication and bearer-token lifecycle
"""

from typing import Any, Dict, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import UnauthorizedError
from core.security import TokenSigner, verify_password
from models.user import User
from repositories.auth_tokens import AuthTokenRepository
from repositories.users import UserRepository
import logging

logger = logging.getLogger(__name__)


class AuthService:
    """
    Register, log in, log out, refresh tokens and change passwords.

    Tokens are JWTs issued by TokenSigner; every issued token is also
    stored as an AuthToken row, and a token only authenticates requests
    while its row exists (logout deletes it).
    """

    def __init__(self, db_session: AsyncSession, signer: TokenSigner):
        self.users = UserRepository(db_session)
        self.tokens = AuthTokenRepository(db_session)
        self.signer = signer

    @staticmethod
    def _claims_for(user: User) -> Dict[str, Any]:
        return {"sub": str(user.id), "email": user.email}

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        full_name: Optional[str] = None,
        company: Optional[str] = None,
        phone: Optional[str] = None
    ) -> User:
        """Raises ConflictError if the email is already registered"""
        user = await self.users.create({
            "username": username,
            "email": email,
            "password": password,
            "full_name": full_name,
            "company": company,
            "phone": phone,
        })
        logger.info(f"Registered user id={user.id}")
        return user

    async def login(self, email: str, password: str) -> Tuple[str, User]:
        user = await self.users.find_by_email(email)
        if user is None or not verify_password(password, user.password):
            logger.info("Rejected login with invalid credentials")
            raise UnauthorizedError("Invalid email or password")

        token = self.signer.issue(self._claims_for(user))
        await self.tokens.add(user.id, token)

        logger.info(f"User id={user.id} logged in")
        return token, user

    async def logout(self, token: str):
        """Forget the token; logging out twice is not an error"""
        removed = await self.tokens.delete_by_token(token)
        logger.info(f"Logout removed {removed} token row(s)")

    async def refresh(self, token: str) -> str:
        """Raises UnauthorizedError if the token's signature or expiry does not verify"""
        claims = self.signer.verify(token)
        user = await self.users.find(int(claims["sub"]))
        if user is None:
            raise UnauthorizedError("Token subject no longer exists")

        new_token = self.signer.issue(claims)
        await self.tokens.add(user.id, new_token)
        return new_token

    async def authenticate(self, token: str) -> User:
        """Resolve the user behind a bearer token that is signed, unexpired and not logged out"""
        claims = self.signer.verify(token)

        if not await self.tokens.exists(token):
            raise UnauthorizedError("Token has been revoked")

        user = await self.users.find(int(claims["sub"]))
        if user is None:
            raise UnauthorizedError("Token subject no longer exists")
        return user

    async def change_password(self, user_id: int, current_password: str, new_password: str) -> User:
        user = await self.users.get(user_id)
        if not verify_password(current_password, user.password):
            raise UnauthorizedError("Current password is incorrect")

        user = await self.users.set_password(user_id, new_password)
        logger.info(f"Password changed for user id={user_id}")
        return user
