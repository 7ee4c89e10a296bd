"""
Infrastructure Errors

Raised by adapters when the store or the hasher cannot do their job.
Business failures never use these; they travel as Result errors.
"""


class InfrastructureError(Exception):
    code = "INTERNAL_ERROR"


class StoreUnavailable(InfrastructureError):
    """Store timed out or the connection failed"""

    code = "STORE_UNAVAILABLE"


class HashError(InfrastructureError):
    """Password hashing failed (resource exhaustion or library failure)"""

    code = "HASH_ERROR"


class UniqueViolation(Exception):
    """Insert rejected by a uniqueness constraint"""
