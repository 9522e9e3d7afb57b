"""
User CRUD and password change. Responses never include the password hash.
"""

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_auth_service, get_current_user, get_db
from models.user import User
from repositories.users import UserRepository
from schemas.common import MessageResponse
from schemas.users import ChangePasswordRequest, UserCreate, UserResponse, UserUpdate
from services.auth import AuthService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("/change-password", response_model=MessageResponse)
async def change_password(
    body: ChangePasswordRequest,
    current_user: User = Depends(get_current_user),
    auth: AuthService = Depends(get_auth_service)
):
    """401 when the current password does not match"""
    await auth.change_password(current_user.id, body.current_password, body.new_password)
    return MessageResponse(message="Password updated successfully")


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(body: UserCreate, db: AsyncSession = Depends(get_db)):
    return await UserRepository(db).create(body.model_dump())


@router.get("", response_model=List[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)):
    return await UserRepository(db).list()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, db: AsyncSession = Depends(get_db)):
    return await UserRepository(db).get(user_id)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(user_id: int, body: UserUpdate, db: AsyncSession = Depends(get_db)):
    """Partial update: only the fields present in the body change"""
    return await UserRepository(db).update(user_id, body.model_dump(exclude_unset=True))


@router.delete("/{user_id}", status_code=204)
async def delete_user(user_id: int, db: AsyncSession = Depends(get_db)):
    await UserRepository(db).delete(user_id)
    return Response(status_code=204)
