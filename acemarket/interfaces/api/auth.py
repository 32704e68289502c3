"""Auth API routes — login, register, me."""

from fastapi import APIRouter, Depends, status

from acemarket.application.services.auth_service import (
    authenticate_user,
    create_access_token,
    register_user,
)
from acemarket.core.exceptions import UnauthorizedException
from acemarket.domain.models.user import User
from acemarket.domain.repositories.user_repository import UserRepository
from acemarket.domain.schemas.auth import AuthResponse, LoginRequest, UserCreate, UserRead
from acemarket.infrastructure.image_storage import ImageStorage
from acemarket.interfaces.api.deps import get_current_user
from acemarket.interfaces.deps import get_image_storage, get_user_repository

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/login", response_model=AuthResponse)
def login(body: LoginRequest, repo: UserRepository = Depends(get_user_repository)):
    user = authenticate_user(repo, body.email, body.password)
    if not user:
        raise UnauthorizedException("Invalid credentials")

    return AuthResponse(
        token=create_access_token(user),
        user=UserRead.model_validate(user),
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: UserCreate,
    repo: UserRepository = Depends(get_user_repository),
    storage: ImageStorage = Depends(get_image_storage),
):
    user = register_user(repo, storage, body)
    return AuthResponse(
        token=create_access_token(user),
        user=UserRead.model_validate(user),
    )


@router.get("/me", response_model=UserRead)
def get_me(user: User = Depends(get_current_user)):
    return UserRead.model_validate(user)
