"""
User Repository Interface.
Defines specific data access operations for Users.
"""

from typing import Optional

from acemarket.domain.repositories.base import BaseRepository
from acemarket.domain.models.user import User


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email, exact match."""
        ...

    def find_conflict(self, username: Optional[str], email: Optional[str], exclude_id: Optional[str] = None) -> Optional[User]:
        """Another user already holding this username or email."""
        ...
