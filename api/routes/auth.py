"""
Registration, login, logout and token refresh
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service, get_bearer_token
from schemas.auth import LoginRequest, LoginResponse, TokenRequest, TokenResponse
from schemas.common import MessageResponse
from schemas.users import UserCreate, UserResponse
from services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=UserResponse, status_code=201)
async def register(body: UserCreate, auth: AuthService = Depends(get_auth_service)):
    """409 if the email is already registered"""
    return await auth.register(
        username=body.username,
        email=body.email,
        password=body.password,
        full_name=body.full_name,
        company=body.company,
        phone=body.phone,
    )


@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    token, user = await auth.login(body.email, body.password)
    return LoginResponse(token=token, user=UserResponse.model_validate(user))


@router.post("/logout", response_model=MessageResponse)
async def logout(
    token: str = Depends(get_bearer_token),
    auth: AuthService = Depends(get_auth_service)
):
    await auth.logout(token)
    return MessageResponse(message="Logged out successfully")


@router.post("/token", response_model=TokenResponse)
async def refresh_token(body: TokenRequest, auth: AuthService = Depends(get_auth_service)):
    return TokenResponse(token=await auth.refresh(body.token))
