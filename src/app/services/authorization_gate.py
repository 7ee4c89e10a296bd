"""
Authorization Gate

Capability checks on the identity resolved for the current request.
"""

from dataclasses import dataclass
from typing import Optional

from src.app.services.session_manager import CurrentIdentity
from src.domain.entities import UserRole
from src.libs.result import Error, Result, Return


@dataclass(frozen=True)
class RequestContext:
    """Per-request values resolved once and passed to handlers"""

    session_token: Optional[str] = None
    identity: Optional[CurrentIdentity] = None


def require_authenticated(context: RequestContext) -> Result[CurrentIdentity]:
    if context.identity is None:
        return Return.err(Error("UNAUTHORIZED", "Authentication required"))
    return Return.ok(context.identity)


def require_admin(context: RequestContext) -> Result[CurrentIdentity]:
    result = require_authenticated(context)
    if result.is_err():
        return result
    if result.value.role != UserRole.admin:
        return Return.err(Error("FORBIDDEN", "Administrator role required"))
    return result
