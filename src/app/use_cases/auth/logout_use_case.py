from typing import Optional

from src.app.services.session_manager import SessionManager
from src.libs.result import Result, Return


class LogoutUseCase:
    """Destroys the caller's session. Always succeeds, even without one."""

    def __init__(self, session_manager: SessionManager):
        self.session_manager = session_manager

    async def execute(self, session_token: Optional[str]) -> Result[None]:
        await self.session_manager.destroy(session_token)
        return Return.ok(None)
