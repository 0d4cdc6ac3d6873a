"""
Use Cases

Organized into domain folders:
- auth/: Identity resolution, authorization gate, sign-up/in/out,
  session refresh, password reset
- invitations/: Invitation lifecycle
- users/: Member management and self-service profile
- tenants/: Company details

Import from subdirectories for better organization.
"""

from .auth import (
    AuthorizeUseCase,
    RefreshSessionUseCase,
    RequestPasswordResetUseCase,
    ResetPasswordUseCase,
    ResolvePrincipalUseCase,
    SignInUseCase,
    SignOutUseCase,
    SignUpUseCase,
)
from .invitations import (
    AcceptInvitationUseCase,
    CancelInvitationUseCase,
    InviteUserUseCase,
    ListPendingInvitationsUseCase,
    ValidateInvitationTokenUseCase,
)
from .tenants import GetCompanyUseCase, UpdateCompanyUseCase
from .users import (
    ListCompanyUsersUseCase,
    RemoveUserUseCase,
    UpdateProfileUseCase,
    UpdateUserRoleUseCase,
)

__all__ = [
    # Auth
    "ResolvePrincipalUseCase",
    "AuthorizeUseCase",
    "SignUpUseCase",
    "SignInUseCase",
    "SignOutUseCase",
    "RefreshSessionUseCase",
    "RequestPasswordResetUseCase",
    "ResetPasswordUseCase",
    # Invitations
    "InviteUserUseCase",
    "ValidateInvitationTokenUseCase",
    "AcceptInvitationUseCase",
    "CancelInvitationUseCase",
    "ListPendingInvitationsUseCase",
    # Users
    "UpdateUserRoleUseCase",
    "RemoveUserUseCase",
    "ListCompanyUsersUseCase",
    "UpdateProfileUseCase",
    # Companies
    "GetCompanyUseCase",
    "UpdateCompanyUseCase",
]
