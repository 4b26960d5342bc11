"""SQL Repositories — SQLAlchemy implementations of the core repository protocols.

Invariants:
    - One AsyncSession per repository instance (the request's session)
    - save() and delete_by_id() commit; a failed commit rolls back before raising
    - A unique-constraint violation on save surfaces as ResourceAlreadyExistsError

Design Decisions:
    - Commit inside save(): each use-case persists exactly once, so the
      repository call is the transaction boundary
    - find_all ordered by id: stable listing without pagination
"""

import logging
from typing import Sequence

from sqlalchemy import delete, exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import AuthorId, CategoryId
from app.core.errors import ResourceAlreadyExistsError
from app.models.author import Author
from app.models.category import Category

logger = logging.getLogger(__name__)


async def _commit_entity(db: AsyncSession, entity, conflict_message: str):
    db.add(entity)
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning(f"Integrity error on save: {e.orig}")
        raise ResourceAlreadyExistsError(conflict_message)
    await db.refresh(entity)
    return entity


class SqlAuthorRepository:
    """AuthorRepository backed by the authors table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def new(self, name: str, email: str, about: str) -> Author:
        return Author(name=name, email=email, about=about)

    async def find_by_id(self, author_id: AuthorId) -> Author | None:
        return await self.db.get(Author, author_id)

    async def find_all(self) -> Sequence[Author]:
        result = await self.db.execute(select(Author).order_by(Author.id))
        return result.scalars().all()

    async def save(self, author: Author) -> Author:
        return await _commit_entity(
            self.db, author, "Author violates a uniqueness constraint.",
        )

    async def delete_by_id(self, author_id: AuthorId) -> None:
        await self.db.execute(delete(Author).where(Author.id == author_id))
        await self.db.commit()


class SqlCategoryRepository:
    """CategoryRepository backed by the categories table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def new(self, cat_name: str, descr: str) -> Category:
        return Category(cat_name=cat_name, descr=descr)

    async def find_by_id(self, category_id: CategoryId) -> Category | None:
        return await self.db.get(Category, category_id)

    async def find_all(self) -> Sequence[Category]:
        result = await self.db.execute(select(Category).order_by(Category.id))
        return result.scalars().all()

    async def save(self, category: Category) -> Category:
        return await _commit_entity(
            self.db, category,
            f"Category with name {category.cat_name} already exists.",
        )

    async def delete_by_id(self, category_id: CategoryId) -> None:
        await self.db.execute(
            delete(Category).where(Category.id == category_id),
        )
        await self.db.commit()

    async def exists_by_name(self, cat_name: str) -> bool:
        result = await self.db.execute(
            select(exists().where(Category.cat_name == cat_name)),
        )
        return bool(result.scalar())
