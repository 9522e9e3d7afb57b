from pydantic import BaseModel, EmailStr, Field

from schemas.common import APIModel
from schemas.users import UserResponse


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginResponse(APIModel):
    token: str
    user: UserResponse


class TokenRequest(BaseModel):
    token: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    token: str
