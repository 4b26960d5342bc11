"""Author Service — create/list/get/update/delete use-cases for authors.

Invariants:
    - get_by_id is the single existence check; update and delete go through it
    - update validates the whole patch before touching the entity, then persists once
    - No uniqueness rule for authors (email may repeat)

Design Decisions:
    - Repository injected as a protocol: tests can pass an in-memory fake
    - Returns entities, not schemas: routes own the wire shape
"""

import logging
from typing import Sequence

from app.core.domain_types import AuthorId, Principal
from app.core.errors import ResourceNotFoundError
from app.core.patch_merge import PatchField, merge_patch, validate_patch
from app.core.repository_protocols import AuthorLike, AuthorRepository
from app.services.log_context import log_extra
from app.schemas.author import AuthorCreate, AuthorUpdate

logger = logging.getLogger(__name__)

AUTHOR_PATCH_FIELDS = (
    PatchField("name", "name"),
    PatchField("email", "email"),
    PatchField("about", "about"),
)


class AuthorService:
    """Author use-cases over an AuthorRepository."""

    def __init__(self, repo: AuthorRepository):
        self.repo = repo

    async def list_all(self) -> Sequence[AuthorLike]:
        return await self.repo.find_all()

    async def get_by_id(self, author_id: AuthorId) -> AuthorLike:
        author = await self.repo.find_by_id(author_id)
        if author is None:
            raise ResourceNotFoundError(f"Author not found with id: {author_id}")
        return author

    async def create(
        self, request: AuthorCreate, actor: Principal | None = None,
    ) -> AuthorLike:
        author = self.repo.new(
            name=request.name, email=request.email, about=request.about,
        )
        saved = await self.repo.save(author)
        logger.info("Author created", extra=log_extra(saved.id, actor))
        return saved

    async def update(
        self, author_id: AuthorId, patch: AuthorUpdate,
        actor: Principal | None = None,
    ) -> AuthorLike:
        """Merge the fields present in `patch` onto the stored author."""
        author = await self.get_by_id(author_id)
        present = patch.present_fields()
        validate_patch(present, AUTHOR_PATCH_FIELDS)
        changed = merge_patch(author, present, AUTHOR_PATCH_FIELDS)
        saved = await self.repo.save(author)
        logger.info(
            f"Author updated: {', '.join(changed) or 'no changes'}",
            extra=log_extra(author_id, actor),
        )
        return saved

    async def delete(
        self, author_id: AuthorId, actor: Principal | None = None,
    ) -> AuthorLike:
        """Delete and return the removed author."""
        author = await self.get_by_id(author_id)
        await self.repo.delete_by_id(author_id)
        logger.info("Author deleted", extra=log_extra(author_id, actor))
        return author
