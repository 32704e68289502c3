"""User domain model — maps to the 'users' table."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Boolean, DateTime, Text, JSON

from acemarket.infrastructure.database import Base


def new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=new_id)
    username = Column(String(100), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    avatar_url = Column(String(1000), nullable=True)

    # Realtor profile
    is_realtor = Column(Boolean, nullable=False, default=False)
    license_number = Column(String(100), nullable=True)
    company = Column(String(200), nullable=True)
    phone = Column(String(50), nullable=True)
    bio = Column(Text, nullable=True)
    specialties = Column(JSON, nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f"<User {self.username}>"
