"""
SQLAlchemy Implementation of Post Repository.
"""

from typing import List

from sqlalchemy import func

from acemarket.domain.models.post import Post
from acemarket.domain.repositories.post_repository import PostRepository
from acemarket.domain.schemas.post import PostFilter
from acemarket.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyPostRepository(SQLAlchemyRepository[Post], PostRepository):
    """Post repository implementation using SQLAlchemy."""

    def get_with_filters(self, filters: PostFilter) -> List[Post]:
        query = self.db.query(Post)

        if filters.user_id:
            query = query.filter(Post.user_id == filters.user_id)
        if filters.type:
            query = query.filter(Post.type == filters.type)
        if filters.q:
            query = query.filter(
                func.lower(Post.content).contains(filters.q.lower(), autoescape=True)
            )

        return query.order_by(Post.created_at.desc()).all()
