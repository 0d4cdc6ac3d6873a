"""
Invitation Use Case DTOs (Data Transfer Objects)

All Response classes for the invitation lifecycle.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from access_control.domain.entities import Invitation


class InvitationResponse(BaseModel):
    """Invitation as seen by company admins"""

    id: str
    tenant_id: str
    invited_by: str
    email: str
    role: str
    status: str
    created_at: str
    expires_at: str
    accepted_at: Optional[str] = None

    @classmethod
    def from_entity(cls, invitation: Invitation, now: datetime) -> "InvitationResponse":
        return cls(
            id=str(invitation.id),
            tenant_id=str(invitation.tenant_id),
            invited_by=str(invitation.invited_by),
            email=invitation.email,
            role=invitation.role.value,
            status=invitation.state_at(now).value,
            created_at=invitation.created_at.isoformat(),
            expires_at=invitation.expires_at.isoformat(),
            accepted_at=invitation.accepted_at.isoformat() if invitation.accepted_at else None,
        )


class InviteUserResponse(BaseModel):
    """Response for invite user use case"""

    invitation: InvitationResponse
    token: str
    accept_url: str
    notification_sent: bool
    warning: Optional[str] = None


class CompanyPreview(BaseModel):
    id: str
    name: str
    slug: str


class InvitationPreview(BaseModel):
    """Public fields of a pending invitation, shown before sign-in"""

    email: str
    role: str
    company: CompanyPreview
    expires_at: str


class AcceptInvitationResponse(BaseModel):
    """Response for accept invitation use case"""

    invitation_id: str
    company: CompanyPreview
    role: str
    accepted_at: str


class CancelInvitationResponse(BaseModel):
    """Response for cancel invitation use case"""

    status: str
    invitation_id: str


class PendingInvitationsResponse(BaseModel):
    data: List[InvitationResponse]
