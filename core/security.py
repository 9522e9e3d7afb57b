"""
Password hashing and bearer-token signing.

Provides:
 - hash_password(password) -> str
 - verify_password(plain_password, hashed_password) -> bool
 - TokenSigner: issues and verifies HS256 JWTs with a fixed lifetime

Hashes use passlib's CryptContext with bcrypt_sha256 (pre-hashes with
SHA-256, so passwords longer than bcrypt's 72-byte limit are not truncated);
plain bcrypt is accepted for verification only.
"""

import uuid
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from core.exceptions import UnauthorizedError

pwd_context = CryptContext(schemes=["bcrypt_sha256", "bcrypt"], deprecated="auto", default="bcrypt_sha256")

# Claims set per issued token, never carried over on refresh
_PER_TOKEN_CLAIMS = ("exp", "iat", "nbf", "jti")


def hash_password(password: str) -> str:
    """Hash a password for storage."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Verify a plaintext password against a stored hash."""
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # Stored value is not a hash passlib recognises
        return False


class TokenSigner:
    """Issue and verify signed access tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256", expires_minutes: int = 60):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_delta = timedelta(minutes=expires_minutes)

    def issue(self, claims: Dict[str, Any]) -> str:
        """
        Create a signed JWT. 'claims' should contain identifying fields
        (e.g. {"sub": "42", "email": "a@b.c"}).
        """
        now = datetime.utcnow()
        to_encode = {k: v for k, v in claims.items() if k not in _PER_TOKEN_CLAIMS}
        to_encode.update({
            "iat": now,
            "exp": now + self.expires_delta,
            # Tokens issued within the same second must still differ
            "jti": uuid.uuid4().hex,
        })
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Dict[str, Any]:
        """Return the token's claims or raise UnauthorizedError."""
        try:
            claims = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            raise UnauthorizedError("Invalid or expired token", original_exception=e)

        if "sub" not in claims:
            raise UnauthorizedError("Token is missing its subject")
        return claims

    def refresh(self, token: str) -> str:
        """Re-issue a verified token with the same subject claims and a fresh expiry."""
        return self.issue(self.verify(token))
