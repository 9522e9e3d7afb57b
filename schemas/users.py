"""
User request/response schemas. The password hash is never part of a response.
"""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from schemas.common import APIModel


class UserCreate(APIModel):
    """Body of POST /users and POST /auth/register"""
    full_name: Optional[str] = Field(None, alias="fullName", max_length=255)
    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1)
    company: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("username cannot be blank")
        return v


class UserUpdate(APIModel):
    """Body of PUT /users/{id}; only the fields sent are applied"""
    full_name: Optional[str] = Field(None, alias="fullName", max_length=255)
    username: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=1)
    company: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)

    @field_validator("full_name", "username", "email", "password")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v


class UserResponse(APIModel):
    id: int
    full_name: str = Field(..., alias="fullName")
    username: str
    email: str
    company: Optional[str] = None
    phone: Optional[str] = None
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")


class ChangePasswordRequest(APIModel):
    current_password: str = Field(..., alias="currentPassword", min_length=1)
    new_password: str = Field(..., alias="newPassword", min_length=1)
