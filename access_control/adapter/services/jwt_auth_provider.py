"""
Local auth provider.

Passwords are bcrypt hashes on AuthAccount; credentials are HS256 JWTs whose
sid claim points at a server-side Session row, so sign-out and member
removal take effect immediately. Reset tokens are random strings stored
only as SHA-256 hashes.
"""

import hashlib
import logging
import secrets
from datetime import UTC, timedelta
from typing import Optional
from uuid import UUID

import bcrypt
from jose import JWTError, jwt

from access_control.app.services.auth_provider import AuthIdentity, IAuthProvider, IssuedSession
from access_control.app.services.unit_of_work import UnitOfWork
from access_control.domain.base import utcnow
from access_control.domain.entities import AuthAccount, PasswordResetToken, Session

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
BCRYPT_ROUNDS = 12
DEFAULT_RESET_TTL = timedelta(hours=1)
# Hash checked when the email is unknown so both failures cost the same
_DUMMY_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(BCRYPT_ROUNDS))


def hash_reset_token(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()


class JwtAuthProvider(IAuthProvider):
    """
    Auth provider backed by the local database.

    Never commits: every call runs inside the caller's unit of work.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        secret: str,
        session_ttl: timedelta,
        reset_ttl: timedelta = DEFAULT_RESET_TTL,
    ):
        self.uow = uow
        self.secret = secret
        self.session_ttl = session_ttl
        self.reset_ttl = reset_ttl

    def _decode(self, credential: str) -> Optional[dict]:
        try:
            return jwt.decode(credential, self.secret, algorithms=[ALGORITHM])
        except JWTError as exc:
            logger.debug(f"Credential rejected: {exc}")
            return None

    async def _live_session(self, credential: Optional[str]) -> Optional[Session]:
        if not credential:
            return None

        payload = self._decode(credential)
        if payload is None:
            return None

        try:
            session_id = UUID(payload["sid"])
            user_id = UUID(payload["sub"])
        except (KeyError, TypeError, ValueError):
            logger.debug("Credential rejected: malformed claims")
            return None

        session = await self.uow.sessions.get_by_id(session_id)
        if session is None or session.user_id != user_id:
            return None
        if session.revoked or session.expires_at <= utcnow():
            return None
        return session

    async def _open_session(self, account: AuthAccount) -> IssuedSession:
        now = utcnow()
        session = await self.uow.sessions.create(
            Session(user_id=account.id, expires_at=now + self.session_ttl)
        )

        payload = {
            "sub": str(account.id),
            "email": account.email,
            "sid": str(session.id),
            "iat": now.replace(tzinfo=UTC),
            "exp": session.expires_at.replace(tzinfo=UTC),
        }
        credential = jwt.encode(payload, self.secret, algorithm=ALGORITHM)

        return IssuedSession(
            identity=AuthIdentity(external_id=account.id, email=account.email),
            credential=credential,
            expires_at=session.expires_at,
        )

    async def validate_credential(self, credential: Optional[str]) -> Optional[AuthIdentity]:
        session = await self._live_session(credential)
        if session is None:
            return None

        account = await self.uow.accounts.get_by_id(session.user_id)
        if account is None:
            return None
        return AuthIdentity(external_id=account.id, email=account.email)

    async def invalidate(self, credential: Optional[str]) -> None:
        session = await self._live_session(credential)
        if session is None:
            return
        await self.uow.sessions.revoke_by_id(session.id, utcnow())
        logger.info(f"Session {session.id} revoked for user {session.user_id}")

    async def register(self, email: str, password: str) -> AuthIdentity:
        password_hash = bcrypt.hashpw(password.encode(), bcrypt.gensalt(BCRYPT_ROUNDS))
        account = await self.uow.accounts.create(
            AuthAccount(email=email, password_hash=password_hash.decode())
        )
        return AuthIdentity(external_id=account.id, email=account.email)

    async def sign_in(self, email: str, password: str) -> Optional[IssuedSession]:
        account = await self.uow.accounts.get_by_email(email)

        if account is None:
            bcrypt.checkpw(password.encode(), _DUMMY_HASH)
            return None

        if not bcrypt.checkpw(password.encode(), account.password_hash.encode()):
            return None

        return await self._open_session(account)

    async def refresh(self, credential: Optional[str]) -> Optional[IssuedSession]:
        session = await self._live_session(credential)
        if session is None:
            return None

        account = await self.uow.accounts.get_by_id(session.user_id)
        if account is None:
            return None

        # Two refreshes of the same credential: only one revokes it
        if not await self.uow.sessions.revoke_by_id(session.id, utcnow()):
            return None

        issued = await self._open_session(account)
        logger.info(f"Session {session.id} rotated for user {account.id}")
        return issued

    async def issue_password_reset(self, email: str) -> Optional[str]:
        account = await self.uow.accounts.get_by_email(email)
        if account is None:
            return None

        token = secrets.token_urlsafe(32)
        now = utcnow()
        await self.uow.reset_tokens.create(
            PasswordResetToken(
                account_id=account.id,
                token_hash=hash_reset_token(token),
                created_at=now,
                expires_at=now + self.reset_ttl,
            )
        )
        return token

    async def reset_password(self, token: str, new_password: str) -> Optional[UUID]:
        if not token:
            return None

        reset = await self.uow.reset_tokens.get_by_token_hash(hash_reset_token(token))
        now = utcnow()
        if reset is None or not reset.is_usable(now):
            return None

        if not await self.uow.reset_tokens.mark_used(reset.id, now):
            return None

        password_hash = bcrypt.hashpw(new_password.encode(), bcrypt.gensalt(BCRYPT_ROUNDS))
        if not await self.uow.accounts.update_password_hash(reset.account_id, password_hash.decode()):
            return None

        logger.info(f"Password reset for account {reset.account_id}")
        return reset.account_id
