"""Users API routes — public profile and self-service profile edits."""

from fastapi import APIRouter, Depends, Response

from acemarket.application.services.user_service import get_user, update_profile
from acemarket.domain.models.user import User
from acemarket.domain.repositories.user_repository import UserRepository
from acemarket.domain.schemas.auth import UserRead, UserUpdate
from acemarket.infrastructure.image_storage import ImageStorage
from acemarket.interfaces.api.deps import get_current_user
from acemarket.interfaces.deps import get_image_storage, get_user_repository

router = APIRouter(prefix="/api/users", tags=["Users"])

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


@router.get("/{user_id}", response_model=UserRead)
def get_profile(
    user_id: str,
    response: Response,
    repo: UserRepository = Depends(get_user_repository),
):
    user = get_user(repo, user_id)
    response.headers.update(NO_CACHE_HEADERS)
    return UserRead.model_validate(user)


@router.put("/{user_id}", response_model=UserRead)
def update_profile_route(
    user_id: str,
    body: UserUpdate,
    response: Response,
    user: User = Depends(get_current_user),
    repo: UserRepository = Depends(get_user_repository),
    storage: ImageStorage = Depends(get_image_storage),
):
    updated = update_profile(repo, storage, user, user_id, body)
    response.headers.update(NO_CACHE_HEADERS)
    return UserRead.model_validate(updated)
