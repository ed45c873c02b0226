"""
BlogComment Model

Comments on a BlogPost. Replies point at their parent comment through
parent_id; a null parent_id marks a direct reply to the post.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Index, String, Text

from app.database import Base
from app.utils.ids import generate_id, utcnow


class BlogComment(Base):
    __tablename__ = "blog_comments"

    id = Column(String(36), primary_key=True, default=generate_id)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    content = Column(Text, nullable=False)

    author_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    blog_post_id = Column(String(36), ForeignKey("blog_posts.id", ondelete="CASCADE"), nullable=False, index=True)

    # Parent comment for nested replies (null = top-level comment)
    parent_id = Column(String(36), ForeignKey("blog_comments.id", ondelete="CASCADE"), nullable=True, index=True)

    __table_args__ = (Index("ix_blog_comments_parent_created", "parent_id", "created_at"),)

    def __repr__(self) -> str:
        return f"<BlogComment(id={self.id}, blog_post_id={self.blog_post_id}, parent_id={self.parent_id})>"
