"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .dtos import LoginResult, RegisterCommand, UserProjection

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "ResetPasswordUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "LoginResult",
    "UserProjection",
]
