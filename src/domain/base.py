from datetime import UTC, datetime


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the DateTime columns the store persists"""
    return datetime.now(UTC).replace(tzinfo=None)


def normalize_email(email: str) -> str:
    return email.strip().lower()
