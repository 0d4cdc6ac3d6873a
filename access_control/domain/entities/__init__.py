"""
Access Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import InvitationState, UserRole

# Export all entities
from .auth_account import AuthAccount
from .invitation import Invitation
from .password_reset_token import PasswordResetToken
from .session import Session
from .tenant import Tenant
from .user_profile import UserProfile

__all__ = [
    # Enums
    "UserRole",
    "InvitationState",
    # Entities
    "AuthAccount",
    "Tenant",
    "UserProfile",
    "Invitation",
    "Session",
    "PasswordResetToken",
]
