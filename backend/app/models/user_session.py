"""UserSession ORM — server-side session store keyed by an opaque token.

Invariants:
    - id is the opaque token sent by the client (cookie or header)
    - user_id NULL means an anonymous session: resolves to no principal
    - A row past expires_at resolves to no principal

Design Decisions:
    - Sessions live in the same database as the resources: no extra store to operate
    - No FK to authors: the session store is owned by the login host, not this API
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class UserSession(Base):
    """Session row resolved by SqlSessionLookup."""
    __tablename__ = "user_sessions"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    role: Mapped[str | None] = mapped_column(String(20), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True,
    )
