"""User service — profile reads and self-service profile updates."""

import structlog
from sqlalchemy.exc import IntegrityError

from acemarket.application.services.auth_service import hash_password, verify_password
from acemarket.core.exceptions import (
    ConflictException,
    EntityNotFoundException,
    ForbiddenException,
    InvalidInputException,
)
from acemarket.domain.models.user import User
from acemarket.domain.repositories.user_repository import UserRepository
from acemarket.domain.schemas.auth import UserUpdate
from acemarket.infrastructure.image_storage import ImageStorage

logger = structlog.get_logger(__name__)

PROFILE_FIELDS = ("license_number", "company", "phone", "bio", "specialties", "is_realtor")


def get_user(repo: UserRepository, user_id: str) -> User:
    if not user_id or not user_id.strip():
        raise InvalidInputException("User ID is required")
    user = repo.get_by_id(user_id)
    if not user:
        raise EntityNotFoundException("User not found")
    return user


def update_profile(
    repo: UserRepository,
    storage: ImageStorage,
    caller: User,
    user_id: str,
    body: UserUpdate,
) -> User:
    user = get_user(repo, user_id)
    if user.id != caller.id:
        raise ForbiddenException("You can only update your own profile")

    supplied = body.model_fields_set
    changes: dict = {}

    for field in ("username", "email"):
        value = getattr(body, field)
        if field in supplied and value is not None and value != getattr(user, field):
            changes[field] = value

    if changes and repo.find_conflict(changes.get("username"), changes.get("email"), exclude_id=user.id):
        raise ConflictException("Email or username already exists")

    # Only rehash when the plaintext actually changed
    if "password" in supplied and body.password is not None:
        if not verify_password(body.password, user.password_hash):
            changes["password_hash"] = hash_password(body.password)

    for field in PROFILE_FIELDS:
        if field not in supplied:
            continue
        value = getattr(body, field)
        if field == "is_realtor" and value is None:
            continue
        changes[field] = value

    if "avatar" in supplied and body.avatar:
        changes["avatar_url"] = storage.upload(body.avatar)
    elif "avatar_url" in supplied:
        changes["avatar_url"] = body.avatar_url or None

    if not changes:
        return user

    try:
        user = repo.update(user, changes)
    except IntegrityError as e:
        raise ConflictException("Email or username already exists") from e

    logger.info(
        "Profile updated",
        user_id=user.id,
        fields=sorted("password" if field == "password_hash" else field for field in changes),
    )
    return user
