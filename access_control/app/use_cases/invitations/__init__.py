"""
Invitation Use Cases

Issue, validate, accept, cancel and list company invitations.
"""

from .accept_invitation_use_case import AcceptInvitationUseCase
from .cancel_invitation_use_case import CancelInvitationUseCase
from .dtos import (
    AcceptInvitationResponse,
    CancelInvitationResponse,
    CompanyPreview,
    InvitationPreview,
    InvitationResponse,
    InviteUserResponse,
    PendingInvitationsResponse,
)
from .invite_user_use_case import DEFAULT_INVITATION_TTL, InviteUserUseCase
from .list_pending_invitations_use_case import ListPendingInvitationsUseCase
from .validate_invitation_token_use_case import ValidateInvitationTokenUseCase

__all__ = [
    "InviteUserUseCase",
    "ValidateInvitationTokenUseCase",
    "AcceptInvitationUseCase",
    "CancelInvitationUseCase",
    "ListPendingInvitationsUseCase",
    "DEFAULT_INVITATION_TTL",
    "InvitationResponse",
    "InviteUserResponse",
    "InvitationPreview",
    "CompanyPreview",
    "AcceptInvitationResponse",
    "CancelInvitationResponse",
    "PendingInvitationsResponse",
]
