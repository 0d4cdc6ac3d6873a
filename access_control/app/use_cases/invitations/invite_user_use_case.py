"""
Invite User Use Case

Handles inviting an email address to join a company with a role.
"""

import logging
import secrets
from datetime import timedelta
from uuid import UUID

from email_validator import EmailNotValidError, validate_email

from libs.result import Result, Return
from access_control.app.errors import bad_request, conflict, forbidden
from access_control.app.services.authorization import check_tenant_admin
from access_control.app.services.notification_sender import INotificationSender
from access_control.app.services.unit_of_work import UnitOfWork
from access_control.domain.base import utcnow
from access_control.domain.entities import Invitation
from access_control.domain.principal import Principal
from access_control.domain.roles import dominates, is_assignable, parse_role, role_choices

from .dtos import InvitationResponse, InviteUserResponse

logger = logging.getLogger(__name__)

DEFAULT_INVITATION_TTL = timedelta(days=7)


class InviteUserUseCase:
    """
    Use case for inviting users to join a company.

    Business Rules:
    - Email and role are validated before any lookup
    - Only admin/owner of the same company can invite
    - owner cannot be handed out; the inviter must dominate the offered role
    - Existing members cannot be invited again; deactivated ones are
      reactivated through the member endpoints instead
    - At most one pending invitation per (company, email); enforced by a
      conditional insert so concurrent duplicates also conflict
    - Expires created_at + TTL
    - Notification failures are reported, never rolled back
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notifier: INotificationSender,
        accept_url_base: str,
        ttl: timedelta = DEFAULT_INVITATION_TTL,
    ):
        self.uow = uow
        self.notifier = notifier
        self.accept_url_base = accept_url_base
        self.ttl = ttl

    async def execute(
        self, principal: Principal, tenant_id: UUID, email: str, role: str
    ) -> Result[InviteUserResponse]:
        """
        Execute invite user use case.

        Args:
            principal: Acting principal (the inviter)
            tenant_id: Company the invitation is for
            email: Email address to invite
            role: Role to offer (admin/supervisor/operator)

        Returns:
            Result with InviteUserResponse DTO, or Error
        """
        try:
            email = validate_email(
                (email or "").strip(), check_deliverability=False
            ).normalized.lower()
        except EmailNotValidError:
            return Return.err(bad_request("INVALID_EMAIL", "Invalid email address"))

        invited_role = parse_role(role)
        if invited_role is None or not is_assignable(invited_role):
            return Return.err(
                bad_request("INVALID_ROLE", f"Invalid role: {role}. Must be one of: {role_choices()}")
            )

        error = check_tenant_admin(principal, tenant_id)
        if error:
            return Return.err(error)

        if not dominates(principal.role, invited_role):
            return Return.err(
                forbidden("INSUFFICIENT_ROLE", "Cannot invite with a role above your own")
            )

        async with self.uow:
            existing_member = await self.uow.profiles.get_by_email_and_tenant(email, tenant_id)
            if existing_member and existing_member.is_active:
                return Return.err(
                    conflict("ALREADY_MEMBER", "User already exists in this company")
                )
            if existing_member:
                return Return.err(
                    conflict(
                        "MEMBER_DEACTIVATED",
                        "User is a deactivated member of this company; reactivate them instead",
                    )
                )

            now = utcnow()
            pending = await self.uow.invitations.get_pending_by_tenant_and_email(
                tenant_id, email, now
            )
            if pending:
                return Return.err(
                    conflict("INVITE_ALREADY_EXISTS", "Invitation already sent to this email")
                )

            invitation = Invitation(
                tenant_id=tenant_id,
                invited_by=principal.id,
                email=email,
                role=invited_role,
                token=secrets.token_urlsafe(32),
                created_at=now,
                expires_at=now + self.ttl,
            )

            created = await self.uow.invitations.create_if_no_pending(invitation, now)
            if not created:
                return Return.err(
                    conflict("INVITE_ALREADY_EXISTS", "Invitation already sent to this email")
                )

            await self.uow.commit()

        logger.info(
            f"Invitation {invitation.id} created for tenant {tenant_id} by user {principal.id}"
        )

        accept_url = f"{self.accept_url_base}?token={invitation.token}"
        notification_sent = True
        warning = None
        try:
            await self.notifier.notify_invited(email, principal.tenant.name, accept_url)
        except Exception:
            logger.warning(
                f"Invitation {invitation.id} created but notification failed", exc_info=True
            )
            notification_sent = False
            warning = "Invitation created but the notification email could not be sent"

        return Return.ok(
            InviteUserResponse(
                invitation=InvitationResponse.from_entity(invitation, now),
                token=invitation.token,
                accept_url=accept_url,
                notification_sent=notification_sent,
                warning=warning,
            )
        )
