"""
User Management Use Cases

All user-related business logic.
"""

from .list_users_use_case import ListUsersUseCase
from .bulk_user_action_use_case import BulkActionResult, BulkUserActionUseCase

__all__ = [
    "ListUsersUseCase",
    "BulkUserActionUseCase",
    "BulkActionResult",
]
