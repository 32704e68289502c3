"""
API Dependencies.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from acemarket.config import get_settings
from acemarket.domain.models.post import Post
from acemarket.domain.models.user import User
from acemarket.domain.repositories.post_repository import PostRepository
from acemarket.domain.repositories.user_repository import UserRepository
from acemarket.domain.search_vocabulary import DEFAULT_VOCABULARY, SearchVocabulary
from acemarket.infrastructure.database import get_db
from acemarket.infrastructure.image_storage import CloudinaryImageStorage, ImageStorage
from acemarket.infrastructure.repositories.post_repository import SQLAlchemyPostRepository
from acemarket.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def get_post_repository(db: Session = Depends(get_db)) -> PostRepository:
    """Get post repository instance."""
    return SQLAlchemyPostRepository(db, Post)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db, User)


@lru_cache
def get_image_storage() -> ImageStorage:
    """Image storage client shared by every request."""
    return CloudinaryImageStorage.from_settings(get_settings())


@lru_cache
def get_search_vocabulary() -> SearchVocabulary:
    """Default gazetteer extended with SEARCH_EXTRA_CITIES."""
    return DEFAULT_VOCABULARY.with_cities(get_settings().SEARCH_EXTRA_CITIES)
