"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, StringConstraints

from src.domain.entities import UserRole, UserStatus


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """Validated intent to create an account"""

    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    email: str
    password: str


# ============================================================================
# Response DTOs
# ============================================================================


class UserProjection(BaseModel):
    """Client-facing view of a user. The password hash is never part of it."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    status: UserStatus
    role: UserRole
    last_login: Optional[datetime] = None


class LoginResult(BaseModel):
    """Authenticated user plus the raw session token for the cookie"""

    user: UserProjection
    session_token: str
