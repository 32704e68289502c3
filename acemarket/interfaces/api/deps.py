"""FastAPI dependency — JWT auth middleware."""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from acemarket.application.services.auth_service import decode_access_token
from acemarket.core.exceptions import UnauthorizedException
from acemarket.domain.models.user import User
from acemarket.domain.repositories.user_repository import UserRepository
from acemarket.interfaces.deps import get_user_repository

security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    repo: UserRepository = Depends(get_user_repository),
) -> User:
    """Extract and validate the current user from JWT token."""
    if credentials is None:
        raise UnauthorizedException("Missing Authorization header")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise UnauthorizedException("Invalid token")

    user_id = payload.get("id")
    if not user_id:
        raise UnauthorizedException("Invalid token")

    user = repo.get_by_id(user_id)
    if user is None:
        raise UnauthorizedException("User not found")

    return user
