from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from access_control.api.error import raise_for_error
from access_control.api.utils.auth import authorize_any, get_credential
from access_control.app.services.auth_provider import IAuthProvider
from access_control.app.services.notification_sender import INotificationSender
from access_control.app.services.unit_of_work import UnitOfWork
from access_control.app.use_cases.auth import (
    PasswordResetRequestedResponse,
    PasswordResetResponse,
    RefreshSessionUseCase,
    RequestPasswordResetUseCase,
    ResetPasswordUseCase,
    SignInResponse,
    SignInUseCase,
    SignOutResponse,
    SignOutUseCase,
    SignUpCommand,
    SignUpResponse,
    SignUpUseCase,
)
from access_control.depends import (
    get_auth_provider,
    get_notification_sender,
    get_reset_url_base,
    get_unit_of_work,
)
from access_control.domain.principal import Principal

router = APIRouter(prefix="/auth", tags=["Authentication"])


class SignUpRequest(BaseModel):
    """
    Sign-up HTTP request payload

    Validates incoming HTTP request before converting to SignUpCommand.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=8, description="User password (min 8 chars)")
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    company_name: Optional[str] = Field(
        None, max_length=100, description="Defaults to \"<first> <last>'s company\""
    )


class SignInRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class ForgotPasswordRequest(BaseModel):
    email: EmailStr


class ResetPasswordRequest(BaseModel):
    token: str = Field(..., min_length=1, description="Token from the reset link")
    password: str = Field(..., min_length=8, description="New password (min 8 chars)")


def _set_session_cookie(response: Response, credential: str):
    response.set_cookie(
        key=ApplicationConfig.SESSION_COOKIE_NAME,
        value=credential,
        max_age=ApplicationConfig.SESSION_TTL_HOURS * 3600,
        httponly=True,
        samesite="lax",
    )


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=SignUpResponse)
async def signup(
    request: SignUpRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    auth_provider: IAuthProvider = Depends(get_auth_provider),
):
    """
    Creates a login identity, a company and the owner's profile.

    Raises:
        - 400 Bad Request: Invalid input
        - 409 Conflict: Email already registered or company slug taken
    """
    command = SignUpCommand(**request.model_dump())
    result = await SignUpUseCase(uow, auth_provider).execute(command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/signin", response_model=SignInResponse)
async def signin(
    request: SignInRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    auth_provider: IAuthProvider = Depends(get_auth_provider),
):
    """
    Opens a session. The credential is returned in the body and also set as
    an HttpOnly cookie.

    Raises:
        - 401 Unauthorized: Invalid email or password
    """
    result = await SignInUseCase(uow, auth_provider).execute(request.email, request.password)
    if result.is_err():
        raise_for_error(result.error)

    _set_session_cookie(response, result.value.access_token)
    return result.value


@router.post("/signout", response_model=SignOutResponse)
async def signout(
    response: Response,
    credential: Optional[str] = Depends(get_credential),
    uow: UnitOfWork = Depends(get_unit_of_work),
    auth_provider: IAuthProvider = Depends(get_auth_provider),
):
    result = await SignOutUseCase(uow, auth_provider).execute(credential)
    response.delete_cookie(ApplicationConfig.SESSION_COOKIE_NAME)
    return result.value


@router.get("/session", response_model=Principal)
async def current_session(principal: Principal = Depends(authorize_any)):
    """The resolved Principal behind the caller's credential"""
    return principal


@router.post("/refresh", response_model=SignInResponse)
async def refresh(
    response: Response,
    credential: Optional[str] = Depends(get_credential),
    uow: UnitOfWork = Depends(get_unit_of_work),
    auth_provider: IAuthProvider = Depends(get_auth_provider),
):
    """
    Rotates the caller's session; the old credential stops working.

    Raises:
        - 401 Unauthorized: Missing, revoked or expired credential
    """
    result = await RefreshSessionUseCase(uow, auth_provider).execute(credential)
    if result.is_err():
        raise_for_error(result.error)

    _set_session_cookie(response, result.value.access_token)
    return result.value


@router.post("/forgot-password", response_model=PasswordResetRequestedResponse)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    auth_provider: IAuthProvider = Depends(get_auth_provider),
    notifier: INotificationSender = Depends(get_notification_sender),
    reset_url_base: str = Depends(get_reset_url_base),
):
    """Sends a reset link if the email is registered; the response never says which"""
    result = await RequestPasswordResetUseCase(
        uow, auth_provider, notifier, reset_url_base
    ).execute(request.email)
    return result.value


@router.post("/reset-password", response_model=PasswordResetResponse)
async def reset_password(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    auth_provider: IAuthProvider = Depends(get_auth_provider),
):
    """
    Sets a new password and signs the account out everywhere.

    Raises:
        - 400 Bad Request: Invalid password, or unknown, used or expired token
    """
    result = await ResetPasswordUseCase(uow, auth_provider).execute(
        request.token, request.password
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
