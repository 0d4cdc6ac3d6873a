from libs.result import Result, Return
from access_control.app.errors import not_found
from access_control.app.services.unit_of_work import UnitOfWork
from access_control.domain.base import utcnow
from access_control.domain.principal import Principal

from .dtos import ProfileResponse, UpdateProfileCommand


class UpdateProfileUseCase:
    """
    Self-service profile edit.

    Always targets the acting principal, so it needs no role check.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, principal: Principal, command: UpdateProfileCommand
    ) -> Result[ProfileResponse]:
        async with self.uow:
            profile = await self.uow.profiles.get_by_id(principal.id)
            if profile is None:
                return Return.err(not_found("USER_NOT_FOUND", "User profile not found"))

            for field, value in command.model_dump(exclude_unset=True).items():
                setattr(profile, field, value)
            profile.updated_at = utcnow()

            profile = await self.uow.profiles.update(profile)

            await self.uow.commit()

            return Return.ok(ProfileResponse.from_entity(profile))
