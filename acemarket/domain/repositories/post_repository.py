"""
Post Repository Interface.
Defines specific data access operations for Posts.
"""

from typing import List

from acemarket.domain.repositories.base import BaseRepository
from acemarket.domain.models.post import Post
from acemarket.domain.schemas.post import PostFilter


class PostRepository(BaseRepository[Post]):
    """Interface for Post-specific operations."""

    def get_with_filters(self, filters: PostFilter) -> List[Post]:
        """Posts matching userId/type exactly and content by substring, newest first."""
        ...
