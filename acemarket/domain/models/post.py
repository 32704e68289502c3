"""Post domain model — maps to the 'posts' table."""

from sqlalchemy import Column, String, DateTime, ForeignKey, Text, JSON
from sqlalchemy.orm import relationship

from acemarket.infrastructure.database import Base
from acemarket.domain.models.user import new_id, utcnow


class Post(Base):
    __tablename__ = "posts"

    id = Column(String(32), primary_key=True, default=new_id)
    type = Column(String(10), nullable=False, index=True)  # NEED, HAVE
    status = Column(String(20), nullable=False, default="active")
    content = Column(Text, nullable=False)
    user_id = Column(String(32), ForeignKey("users.id"), nullable=False, index=True)
    image_url = Column(String(1000), nullable=True)

    # Stored as documents, camelCase keys as on the wire
    property_details = Column(JSON, nullable=True)
    tags = Column(JSON, nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    owner = relationship("User", lazy="joined")

    def __repr__(self):
        return f"<Post {self.id} - {self.type}>"
