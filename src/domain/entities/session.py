"""
Session Entity

Server-side record behind the session cookie.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import ForeignKey, Integer
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Session(SQLModel, table=True):
    """
    Session entity - binds an opaque cookie token to a user id.

    Business Rules:
    - Only the SHA-256 hash of the token is stored
    - Expired sessions resolve to no identity
    - Sessions disappear with their user
    """

    __tablename__ = "sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    token_hash: str = Field(unique=True, index=True, max_length=64)
    user_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    __table_args__ = (Index("idx_session_expires_at", "expires_at"),)
