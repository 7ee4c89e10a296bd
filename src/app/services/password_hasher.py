from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """One-way salted password hashing - application layer"""

    @abstractmethod
    async def hash(self, plaintext: str) -> str:
        """Hash a password; the salt is embedded in the output. Raises HashError."""
        pass

    @abstractmethod
    async def verify(self, plaintext: str, password_hash: str) -> bool:
        """Check a password against a stored hash. Never raises on mismatch."""
        pass

    @abstractmethod
    async def dummy_verify(self, plaintext: str) -> None:
        """Spend one verification so unknown accounts take as long as known ones"""
        pass
