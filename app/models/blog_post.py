from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, String, Text

from app.database import Base
from app.utils.ids import generate_id, utcnow


class BlogPost(Base):
    __tablename__ = "blog_posts"

    id = Column(String(36), primary_key=True, default=generate_id)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    published = Column(Boolean, default=False, nullable=False)

    author_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    blog_id = Column(String(36), ForeignKey("blogs.id", ondelete="CASCADE"), nullable=False, index=True)

    __table_args__ = (Index("ix_blog_posts_blog_created", "blog_id", "created_at"),)

    def __repr__(self) -> str:
        return f"<BlogPost(id={self.id}, blog_id={self.blog_id}, author_id={self.author_id})>"
