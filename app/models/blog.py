from sqlalchemy import Column, DateTime, ForeignKey, String, Text

from app.database import Base
from app.utils.ids import generate_id, utcnow


class Blog(Base):
    __tablename__ = "blogs"

    id = Column(String(36), primary_key=True, default=generate_id)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    author_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Blog(id={self.id}, name={self.name}, author_id={self.author_id})>"
