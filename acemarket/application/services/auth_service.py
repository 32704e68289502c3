"""Auth service — JWT token management, password hashing, registration and login."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import structlog
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError

from acemarket.config import get_settings
from acemarket.core.exceptions import ConflictException
from acemarket.domain.models.user import User
from acemarket.domain.repositories.user_repository import UserRepository
from acemarket.domain.schemas.auth import UserCreate
from acemarket.infrastructure.image_storage import ImageStorage

settings = get_settings()
logger = structlog.get_logger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    """Signed token carrying the user's id and email."""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.JWT_EXPIRATION_MINUTES)
    )
    to_encode = {"id": user.id, "email": user.email, "exp": expire}
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    """Payload of a valid token, None for expired, malformed or forged ones."""
    try:
        payload = jwt.decode(
            token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM]
        )
        return payload
    except JWTError:
        return None


def authenticate_user(repo: UserRepository, email: str, password: str) -> Optional[User]:
    user = repo.get_by_email(email)
    if not user or not verify_password(password, user.password_hash):
        return None
    return user


def register_user(repo: UserRepository, storage: ImageStorage, body: UserCreate) -> User:
    if repo.find_conflict(body.username, body.email):
        raise ConflictException("Email or username already exists")

    avatar_url = body.avatar_url or None
    if body.avatar:
        avatar_url = storage.upload(body.avatar)

    data = {
        "username": body.username,
        "email": body.email,
        "password_hash": hash_password(body.password),
        "avatar_url": avatar_url,
        "is_realtor": body.is_realtor,
        "license_number": body.license_number,
        "company": body.company,
        "phone": body.phone,
        "bio": body.bio,
        "specialties": body.specialties,
    }
    try:
        user = repo.create(data)
    except IntegrityError as e:
        # Lost a race against a concurrent registration
        raise ConflictException("Email or username already exists") from e

    logger.info("User registered", user_id=user.id, is_realtor=user.is_realtor)
    return user
