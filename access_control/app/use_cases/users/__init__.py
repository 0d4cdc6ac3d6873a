"""
User Management Use Cases

Member administration and self-service profile edits.
"""

from .dtos import (
    MemberListResponse,
    MemberResponse,
    ProfileResponse,
    RemoveUserResponse,
    UpdateProfileCommand,
    UpdateUserRoleResponse,
)
from .list_company_users_use_case import ListCompanyUsersUseCase
from .remove_user_use_case import RemoveUserUseCase
from .update_profile_use_case import UpdateProfileUseCase
from .update_user_role_use_case import UpdateUserRoleUseCase

__all__ = [
    "UpdateUserRoleUseCase",
    "RemoveUserUseCase",
    "ListCompanyUsersUseCase",
    "UpdateProfileUseCase",
    "UpdateProfileCommand",
    "MemberResponse",
    "MemberListResponse",
    "UpdateUserRoleResponse",
    "RemoveUserResponse",
    "ProfileResponse",
]
