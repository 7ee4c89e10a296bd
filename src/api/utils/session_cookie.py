"""
Session Cookie

Writes and clears the cookie carrying the opaque session token.
Attributes come from the application config so that production can use
SameSite=None (cross-site frontend) and local development SameSite=Lax.
"""

from fastapi import Response


def set_session_cookie(response: Response, token: str, config) -> None:
    response.set_cookie(
        config.SESSION_COOKIE_NAME,
        token,
        max_age=config.SESSION_TTL_SECONDS,
        path="/",
        secure=config.SESSION_COOKIE_SECURE,
        httponly=True,
        samesite=config.SESSION_COOKIE_SAMESITE,
    )


def clear_session_cookie(response: Response, config) -> None:
    response.delete_cookie(
        config.SESSION_COOKIE_NAME,
        path="/",
        secure=config.SESSION_COOKIE_SECURE,
        httponly=True,
        samesite=config.SESSION_COOKIE_SAMESITE,
    )
