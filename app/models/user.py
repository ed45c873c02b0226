from sqlalchemy import Column, DateTime, String

from app.database import Base
from app.utils.ids import generate_id, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_id)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    username = Column(String, unique=True, nullable=True, index=True)
    email = Column(String, unique=True, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
