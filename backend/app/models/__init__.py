"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Authors and categories are independent aggregates; no relationships

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from app.models.author import Author  # noqa: F401
from app.models.category import Category  # noqa: F401
from app.models.user_session import UserSession  # noqa: F401
