"""Category ORM — persists a blog post category.

Invariants:
    - cat_name is unique across all categories (also checked by CategoryService on create)
    - descr is non-nullable

Design Decisions:
    - Unique constraint kept at storage level: a create that loses the
      check-then-insert race still fails, surfacing as a 409 via DatabaseSessionManager
"""

from sqlalchemy import Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Category(Base):
    """Blog category entity."""
    __tablename__ = "categories"
    __table_args__ = (
        UniqueConstraint("cat_name", name="uq_categories_cat_name"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    cat_name: Mapped[str] = mapped_column(String(100), nullable=False)
    descr: Mapped[str] = mapped_column(Text, nullable=False)
