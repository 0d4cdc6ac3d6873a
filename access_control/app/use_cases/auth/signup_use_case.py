import re

from libs.result import Result, Return

from access_control.app.errors import bad_request, conflict
from access_control.app.services.auth_provider import IAuthProvider
from access_control.app.services.unit_of_work import UnitOfWork
from access_control.domain.entities import Tenant, UserProfile, UserRole

from .dtos import CompanyInfo, SignUpCommand, SignUpResponse, UserInfo

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def make_slug(name: str) -> str:
    return _NON_SLUG_CHARS.sub("-", name.lower()).strip("-")[:120]


class SignUpUseCase:
    """
    Sign-up Use Case

    Business Logic:
    1. Reject an email that already has a login identity
    2. Derive the company slug; it must be globally unique
    3. Register the identity with the auth provider (bcrypt hash)
    4. Create the company and the owner profile
    5. Commit everything in one transaction
    """

    def __init__(self, uow: UnitOfWork, auth_provider: IAuthProvider):
        self.uow = uow
        self.auth_provider = auth_provider

    async def execute(self, command: SignUpCommand) -> Result[SignUpResponse]:
        email = command.email.strip().lower()
        company_name = (command.company_name or "").strip() or (
            f"{command.first_name} {command.last_name}".strip() + "'s company"
        )
        slug = make_slug(company_name)
        if not slug:
            return Return.err(
                bad_request(
                    "INVALID_COMPANY_NAME",
                    "Company name must contain letters or digits",
                )
            )

        async with self.uow:
            if await self.uow.accounts.get_by_email(email):
                return Return.err(
                    conflict("EMAIL_ALREADY_REGISTERED", "Email already registered")
                )

            if await self.uow.tenants.get_by_slug(slug):
                return Return.err(
                    conflict("COMPANY_SLUG_TAKEN", "A company with this name already exists")
                )

            identity = await self.auth_provider.register(email, command.password)

            tenant = await self.uow.tenants.create(
                Tenant(name=company_name, slug=slug, email=email)
            )

            profile = await self.uow.profiles.create(
                UserProfile(
                    id=identity.external_id,
                    email=email,
                    first_name=command.first_name,
                    last_name=command.last_name,
                    role=UserRole.owner,
                    tenant_id=tenant.id,
                )
            )

            await self.uow.commit()

            return Return.ok(
                SignUpResponse(
                    user=UserInfo(
                        id=str(profile.id),
                        email=profile.email,
                        first_name=profile.first_name,
                        last_name=profile.last_name,
                        role=profile.role.value,
                    ),
                    company=CompanyInfo(id=str(tenant.id), name=tenant.name, slug=tenant.slug),
                )
            )
