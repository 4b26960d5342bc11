"""Author ORM — persists a blog author.

Invariants:
    - id is an integer primary key assigned by the store
    - name, email, about are non-nullable
    - role defaults to USER; not writable through the author endpoints

Design Decisions:
    - No soft delete: DELETE removes the row
    - email not unique: no duplicate rule exists for authors
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.domain_types import Role
from app.db.base import Base


class Author(Base):
    """Blog author entity."""
    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    about: Mapped[str] = mapped_column(String(200), nullable=False)
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default=Role.USER.value,
    )
