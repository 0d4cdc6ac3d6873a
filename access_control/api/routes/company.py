from datetime import timedelta
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from access_control.api.error import raise_for_error
from access_control.api.utils.auth import authorize_admin, authorize_any, authorize_supervisor
from access_control.api.utils.params import parse_uuid
from access_control.app.services.notification_sender import INotificationSender
from access_control.app.services.unit_of_work import UnitOfWork
from access_control.app.use_cases.invitations import (
    CancelInvitationResponse,
    CancelInvitationUseCase,
    InviteUserResponse,
    InviteUserUseCase,
    ListPendingInvitationsUseCase,
    PendingInvitationsResponse,
)
from access_control.app.use_cases.tenants import (
    CompanyResponse,
    GetCompanyUseCase,
    UpdateCompanyCommand,
    UpdateCompanyUseCase,
)
from access_control.app.use_cases.users import (
    ListCompanyUsersUseCase,
    MemberListResponse,
    RemoveUserResponse,
    RemoveUserUseCase,
    UpdateUserRoleResponse,
    UpdateUserRoleUseCase,
)
from access_control.depends import (
    get_accept_url_base,
    get_invitation_ttl,
    get_notification_sender,
    get_unit_of_work,
)
from access_control.domain.principal import Principal

router = APIRouter(prefix="/companies", tags=["Company"])


def _company_id(company_id: str):
    return parse_uuid(company_id, "INVALID_COMPANY_ID", "company ID")


class UpdateCompanyRequest(BaseModel):
    name: Optional[str] = Field(None, max_length=100)
    email: Optional[str] = Field(None, max_length=255)
    logo_url: Optional[str] = Field(None, max_length=500)


class UpdateUserRequest(BaseModel):
    """At least one of role / is_active"""

    role: Optional[str] = Field(None, description="admin, supervisor or operator")
    is_active: Optional[bool] = None


class InviteUserRequest(BaseModel):
    email: str = Field(..., description="Invitee email address")
    role: str = Field(..., description="admin, supervisor or operator")


@router.get("/{company_id}", response_model=CompanyResponse)
async def get_company(
    company_id: str,
    principal: Principal = Depends(authorize_any),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetCompanyUseCase(uow).execute(principal, _company_id(company_id))
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/{company_id}", response_model=CompanyResponse)
async def update_company(
    company_id: str,
    request: UpdateCompanyRequest,
    principal: Principal = Depends(authorize_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = UpdateCompanyCommand(**request.model_dump(exclude_unset=True))
    result = await UpdateCompanyUseCase(uow).execute(principal, _company_id(company_id), command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{company_id}/users", response_model=MemberListResponse)
async def list_company_users(
    company_id: str,
    search: Optional[str] = Query(None, description="Matches first name, last name or email"),
    page: int = Query(1),
    limit: int = Query(10),
    principal: Principal = Depends(authorize_supervisor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListCompanyUsersUseCase(uow).execute(
        principal, _company_id(company_id), search=search, page=page, limit=limit
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/{company_id}/users/{user_id}", response_model=UpdateUserRoleResponse)
async def update_company_user(
    company_id: str,
    user_id: str,
    request: UpdateUserRequest,
    principal: Principal = Depends(authorize_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change a member's role and/or active flag.

    Raises:
        - 400 Bad Request: Targeting yourself, invalid role, no changes
        - 403 Forbidden: Other company, or target/new role above the caller
        - 404 Not Found: Unknown user
    """
    result = await UpdateUserRoleUseCase(uow).execute(
        principal,
        _company_id(company_id),
        parse_uuid(user_id, "INVALID_USER_ID", "user ID"),
        role=request.role,
        is_active=request.is_active,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{company_id}/users/{user_id}", response_model=RemoveUserResponse)
async def remove_company_user(
    company_id: str,
    user_id: str,
    principal: Principal = Depends(authorize_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Soft-deletes the member and revokes their sessions"""
    result = await RemoveUserUseCase(uow).execute(
        principal,
        _company_id(company_id),
        parse_uuid(user_id, "INVALID_USER_ID", "user ID"),
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{company_id}/invitations",
    status_code=status.HTTP_201_CREATED,
    response_model=InviteUserResponse,
)
async def invite_user(
    company_id: str,
    request: InviteUserRequest,
    principal: Principal = Depends(authorize_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationSender = Depends(get_notification_sender),
    ttl: timedelta = Depends(get_invitation_ttl),
    accept_url_base: str = Depends(get_accept_url_base),
):
    """
    Invite an email address to the company.

    Raises:
        - 400 Bad Request: Invalid email or role
        - 403 Forbidden: Other company, or role above the caller
        - 409 Conflict: Already a member, or a pending invitation exists
    """
    use_case = InviteUserUseCase(uow, notifier, accept_url_base, ttl)
    result = await use_case.execute(principal, _company_id(company_id), request.email, request.role)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{company_id}/invitations", response_model=PendingInvitationsResponse)
async def list_pending_invitations(
    company_id: str,
    principal: Principal = Depends(authorize_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListPendingInvitationsUseCase(uow).execute(principal, _company_id(company_id))
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{company_id}/invitations/{invitation_id}", response_model=CancelInvitationResponse
)
async def cancel_invitation(
    company_id: str,
    invitation_id: str,
    principal: Principal = Depends(authorize_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Idempotent: cancelling an expired or accepted invitation is a no-op"""
    result = await CancelInvitationUseCase(uow).execute(
        principal,
        _company_id(company_id),
        parse_uuid(invitation_id, "INVALID_INVITATION_ID", "invitation ID"),
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
