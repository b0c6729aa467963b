"""User model for session authentication."""
from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from catalog.database import Base


class User(Base):
    """Account allowed to manage the catalog."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime, server_default=func.now(), onupdate=func.now(), nullable=False
    )

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
