"""
SQLAlchemy Implementation of User Repository.
"""

from typing import Optional

from sqlalchemy import or_

from acemarket.domain.models.user import User
from acemarket.domain.repositories.user_repository import UserRepository
from acemarket.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def find_conflict(self, username: Optional[str], email: Optional[str], exclude_id: Optional[str] = None) -> Optional[User]:
        clauses = []
        if username:
            clauses.append(User.username == username)
        if email:
            clauses.append(User.email == email)
        if not clauses:
            return None

        query = self.db.query(User).filter(or_(*clauses))
        if exclude_id:
            query = query.filter(User.id != exclude_id)
        return query.first()
