"""Session Store — SQL-backed session lookup and issuance.

Invariants:
    - resolve() never raises for unknown, expired or anonymous sessions: it returns None
    - Expiry is compared in SQL against the current UTC time
    - Tokens are 32 bytes of urlsafe randomness; never logged
    - Session lifetime defaults to settings.session_ttl_minutes

Design Decisions:
    - Lookup and issuance split: the gate only needs SqlSessionLookup,
      the login host (and test fixtures) use SqlSessionStore
    - Synchronous per-request lookup, no caching: revocation is immediate
"""

import logging
from datetime import datetime, timedelta, timezone
from secrets import token_urlsafe

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.core.domain_types import Principal, Role, SessionToken, UserId
from app.models.user_session import UserSession

logger = logging.getLogger(__name__)


class SqlSessionLookup:
    """SessionLookup backed by the user_sessions table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def resolve(self, session_id: SessionToken) -> Principal | None:
        if not session_id:
            return None
        result = await self.db.execute(
            select(UserSession)
            .where(UserSession.id == session_id)
            .where(UserSession.expires_at > datetime.now(timezone.utc)),
        )
        row = result.scalar_one_or_none()
        if row is None or row.user_id is None:
            return None
        return Principal(user_id=UserId(row.user_id), role=Role.parse(row.role))


class SqlSessionStore:
    """Issues and revokes sessions."""

    def __init__(self, db: AsyncSession, ttl_minutes: int | None = None):
        self.db = db
        if ttl_minutes is None:
            ttl_minutes = get_settings().session_ttl_minutes
        self.ttl = timedelta(minutes=ttl_minutes)

    async def open_session(
        self, user_id: int | None, role: str | None,
    ) -> SessionToken:
        """Persist a new session and return its token."""
        now = datetime.now(timezone.utc)
        token = SessionToken(token_urlsafe(32))
        self.db.add(UserSession(
            id=token, user_id=user_id, role=role,
            created_at=now, expires_at=now + self.ttl,
        ))
        await self.db.commit()
        logger.info("Session opened", extra={"user_id": user_id, "role": role})
        return token

    async def close_session(self, session_id: SessionToken) -> None:
        await self.db.execute(
            delete(UserSession).where(UserSession.id == session_id),
        )
        await self.db.commit()
