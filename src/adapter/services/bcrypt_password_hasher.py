import asyncio

import bcrypt

from src.app.errors import HashError
from src.app.services.password_hasher import IPasswordHasher

# bcrypt only reads the first 72 bytes of a password; newer releases raise
# instead of ignoring the rest
BCRYPT_MAX_PASSWORD_BYTES = 72


def _password_bytes(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


class BcryptPasswordHasher(IPasswordHasher):
    """
    bcrypt implementation of the password hasher.

    Hashing and checking run in a worker thread so the event loop keeps
    serving other requests while bcrypt burns CPU. Passwords are cut to
    72 UTF-8 bytes before every call, as bcrypt itself always did.
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        self._dummy_hash = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds))

    async def hash(self, plaintext: str) -> str:
        try:
            hashed = await asyncio.to_thread(
                bcrypt.hashpw, _password_bytes(plaintext), bcrypt.gensalt(self.rounds)
            )
        except (MemoryError, ValueError) as exc:
            raise HashError("Password hashing failed") from exc
        return hashed.decode("utf-8")

    async def verify(self, plaintext: str, password_hash: str) -> bool:
        try:
            return await asyncio.to_thread(
                bcrypt.checkpw, _password_bytes(plaintext), password_hash.encode("utf-8")
            )
        except ValueError:
            # Malformed stored hash
            return False

    async def dummy_verify(self, plaintext: str) -> None:
        await asyncio.to_thread(
            bcrypt.checkpw, _password_bytes(plaintext), self._dummy_hash
        )
