from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from access_control.api.error import raise_for_error
from access_control.api.utils.auth import authorize_any
from access_control.app.services.unit_of_work import UnitOfWork
from access_control.app.use_cases.invitations import (
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    InvitationPreview,
    ValidateInvitationTokenUseCase,
)
from access_control.depends import get_unit_of_work
from access_control.domain.principal import Principal

router = APIRouter(prefix="/invitations", tags=["Invitations"])


class AcceptInvitationRequest(BaseModel):
    token: str = Field(..., min_length=1, description="Invitation token from the email link")


@router.get("/validate", response_model=InvitationPreview)
async def validate_invitation(
    token: str = Query("", description="Invitation token"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Public preview of a pending invitation.

    Raises:
        - 400 Bad Request: Token missing
        - 404 Not Found: Unknown, expired or already accepted
    """
    result = await ValidateInvitationTokenUseCase(uow).execute(token)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/accept", response_model=AcceptInvitationResponse)
async def accept_invitation(
    request: AcceptInvitationRequest,
    principal: Principal = Depends(authorize_any),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Joins the caller to the inviting company with the invited role.

    Raises:
        - 401 Unauthorized: Not signed in
        - 403 Forbidden: Invitation addressed to another email
        - 404 Not Found: Unknown, expired or already accepted
    """
    result = await AcceptInvitationUseCase(uow).execute(principal, request.token)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
