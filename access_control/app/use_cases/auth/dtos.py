"""
Auth Use Case DTOs (Data Transfer Objects)

Command and Response classes for sign-up, sign-in and sign-out.
"""

from typing import Optional

from pydantic import BaseModel


class SignUpCommand(BaseModel):
    """
    Sign-up command - validated registration intent

    Created by API layer after request validation passes.
    """

    email: str
    password: str
    first_name: str
    last_name: str
    company_name: Optional[str] = None


class UserInfo(BaseModel):
    id: str
    email: str
    first_name: Optional[str]
    last_name: Optional[str]
    role: str


class CompanyInfo(BaseModel):
    id: str
    name: str
    slug: str


class SignUpResponse(BaseModel):
    user: UserInfo
    company: CompanyInfo


class SignInResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_at: str
    user_id: str


class SignOutResponse(BaseModel):
    status: str


class PasswordResetRequestedResponse(BaseModel):
    status: str
    message: str


class PasswordResetResponse(BaseModel):
    status: str
    message: str
    sessions_revoked: int
