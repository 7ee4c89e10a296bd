"""
User Entity

Represents an account that can log in to the frontend.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow
from .enums import UserRole, UserStatus


class User(SQLModel, table=True):
    """
    User entity - an account identified by its email.

    Business Rules:
    - Email must be unique across all users (stored lower-cased)
    - Password stored as bcrypt hash, replaced wholesale on reset
    - Blocked users keep their credentials but are refused a session
    - last_login is stamped on registration, login and password reset
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    status: UserStatus = Field(default=UserStatus.active)
    role: UserRole = Field(default=UserRole.member)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    last_login: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_status", "status"),)
