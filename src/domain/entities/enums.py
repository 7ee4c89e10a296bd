"""
Account Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserStatus(str, Enum):
    """User account status"""

    active = "active"
    blocked = "blocked"


class UserRole(str, Enum):
    """Capability attached to a user account"""

    admin = "admin"
    member = "member"


class BulkAction(str, Enum):
    """Administrative actions applied to a set of users at once"""

    block = "block"
    unblock = "unblock"
    delete = "delete"
