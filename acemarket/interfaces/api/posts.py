"""Posts API routes — list, read, create, update."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from acemarket.application.services.post_service import (
    create_post,
    get_post,
    list_posts,
    update_post,
)
from acemarket.domain.models.user import User
from acemarket.domain.repositories.post_repository import PostRepository
from acemarket.domain.schemas.post import PostCreate, PostFilter, PostRead, PostUpdate
from acemarket.infrastructure.image_storage import ImageStorage
from acemarket.interfaces.api.deps import get_current_user
from acemarket.interfaces.deps import get_image_storage, get_post_repository

router = APIRouter(prefix="/api/posts", tags=["Posts"])


@router.get("", response_model=List[PostRead])
def list_posts_route(
    user_id: Optional[str] = Query(None, alias="userId"),
    post_type: Optional[str] = Query(None, alias="type"),
    q: Optional[str] = None,
    repo: PostRepository = Depends(get_post_repository),
):
    filters = PostFilter(user_id=user_id, type=post_type, q=q)
    return [PostRead.model_validate(p) for p in list_posts(repo, filters)]


@router.post("", response_model=PostRead, status_code=status.HTTP_201_CREATED)
def create_post_route(
    body: PostCreate,
    user: User = Depends(get_current_user),
    repo: PostRepository = Depends(get_post_repository),
    storage: ImageStorage = Depends(get_image_storage),
):
    post = create_post(repo, storage, user, body)
    return PostRead.model_validate(post)


@router.get("/{post_id}", response_model=PostRead)
def get_post_route(post_id: str, repo: PostRepository = Depends(get_post_repository)):
    return PostRead.model_validate(get_post(repo, post_id))


@router.put("/{post_id}", response_model=PostRead)
def update_post_route(
    post_id: str,
    body: PostUpdate,
    user: User = Depends(get_current_user),
    repo: PostRepository = Depends(get_post_repository),
    storage: ImageStorage = Depends(get_image_storage),
):
    post = update_post(repo, storage, user, post_id, body)
    return PostRead.model_validate(post)
