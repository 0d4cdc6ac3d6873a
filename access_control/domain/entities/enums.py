"""
Access Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Role of a user within their company, highest first"""

    owner = "owner"
    admin = "admin"
    supervisor = "supervisor"
    operator = "operator"


class InvitationState(str, Enum):
    """Invitation lifecycle state, derived from timestamps at a given instant"""

    pending = "pending"
    accepted = "accepted"
    expired = "expired"
