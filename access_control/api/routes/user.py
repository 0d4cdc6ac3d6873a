from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from access_control.api.error import raise_for_error
from access_control.api.utils.auth import authorize_any
from access_control.app.services.unit_of_work import UnitOfWork
from access_control.app.use_cases.users import (
    ProfileResponse,
    UpdateProfileCommand,
    UpdateProfileUseCase,
)
from access_control.depends import get_unit_of_work
from access_control.domain.principal import Principal

router = APIRouter(prefix="/users", tags=["User"])


class UpdateProfileRequest(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=50)
    last_name: Optional[str] = Field(None, min_length=1, max_length=50)
    avatar_url: Optional[str] = Field(None, max_length=500)


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(principal: Principal = Depends(authorize_any)):
    return ProfileResponse(
        id=str(principal.id),
        email=principal.email,
        first_name=principal.first_name,
        last_name=principal.last_name,
        avatar_url=principal.avatar_url,
        role=principal.role.value,
        tenant_id=str(principal.tenant_id),
        is_active=principal.is_active,
    )


@router.put("/profile", response_model=ProfileResponse)
async def update_profile(
    request: UpdateProfileRequest,
    principal: Principal = Depends(authorize_any),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Self-service profile update; always targets the caller's own profile.
    """
    command = UpdateProfileCommand(**request.model_dump(exclude_unset=True))
    result = await UpdateProfileUseCase(uow).execute(principal, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
