from sqlalchemy import Column, DateTime, ForeignKey, String, Text

from app.database import Base
from app.utils.ids import generate_id, utcnow


class Profile(Base):
    """One-to-one extension of a User carrying the public bio."""

    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True, default=generate_id)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    bio = Column(Text, nullable=False)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Profile(id={self.id}, user_id={self.user_id})>"
