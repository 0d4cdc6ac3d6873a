"""
Authentication Use Cases

Identity resolution, the authorization gate, session lifecycle and
password reset.
"""

from .authorize_use_case import AuthorizeUseCase
from .dtos import (
    CompanyInfo,
    PasswordResetRequestedResponse,
    PasswordResetResponse,
    SignInResponse,
    SignOutResponse,
    SignUpCommand,
    SignUpResponse,
    UserInfo,
)
from .refresh_session_use_case import RefreshSessionUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .resolve_principal_use_case import ResolvePrincipalUseCase
from .signin_use_case import SignInUseCase
from .signout_use_case import SignOutUseCase
from .signup_use_case import SignUpUseCase

__all__ = [
    # Use Cases
    "ResolvePrincipalUseCase",
    "AuthorizeUseCase",
    "SignUpUseCase",
    "SignInUseCase",
    "SignOutUseCase",
    "RefreshSessionUseCase",
    "RequestPasswordResetUseCase",
    "ResetPasswordUseCase",
    # DTOs - Commands
    "SignUpCommand",
    # DTOs - Responses
    "SignUpResponse",
    "SignInResponse",
    "SignOutResponse",
    "PasswordResetRequestedResponse",
    "PasswordResetResponse",
    # DTOs - Nested Models
    "UserInfo",
    "CompanyInfo",
]
