"""Category Service — create/list/get/update/delete use-cases for categories.

Invariants:
    - create rejects a duplicate catName (exact match) BEFORE any write
    - update validates the whole patch before touching the entity, then persists once
    - update does NOT re-check catName uniqueness against other rows; the
      table's unique constraint is the only guard there (surfaces as 409)

Design Decisions:
    - exists_by_name then save is check-then-act with no lock: two concurrent
      creates can both pass the check; the unique constraint rejects the loser
"""

import logging
from typing import Sequence

from app.core.domain_types import CategoryId, Principal
from app.core.errors import ResourceAlreadyExistsError, ResourceNotFoundError
from app.core.patch_merge import PatchField, merge_patch, validate_patch
from app.core.repository_protocols import CategoryLike, CategoryRepository
from app.services.log_context import log_extra
from app.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)

CATEGORY_PATCH_FIELDS = (
    PatchField("cat_name", "catName"),
    PatchField("descr", "descr"),
)


class CategoryService:
    """Category use-cases over a CategoryRepository."""

    def __init__(self, repo: CategoryRepository):
        self.repo = repo

    async def list_all(self) -> Sequence[CategoryLike]:
        return await self.repo.find_all()

    async def get_by_id(self, category_id: CategoryId) -> CategoryLike:
        category = await self.repo.find_by_id(category_id)
        if category is None:
            raise ResourceNotFoundError(
                f"Category with id {category_id} not found.",
            )
        return category

    async def create(
        self, request: CategoryCreate, actor: Principal | None = None,
    ) -> CategoryLike:
        if await self.repo.exists_by_name(request.cat_name):
            raise ResourceAlreadyExistsError(
                f"Category with name {request.cat_name} already exists.",
            )
        category = self.repo.new(cat_name=request.cat_name, descr=request.descr)
        saved = await self.repo.save(category)
        logger.info("Category created", extra=log_extra(saved.id, actor))
        return saved

    async def update(
        self, category_id: CategoryId, patch: CategoryUpdate,
        actor: Principal | None = None,
    ) -> CategoryLike:
        category = await self.get_by_id(category_id)
        present = patch.present_fields()
        validate_patch(present, CATEGORY_PATCH_FIELDS)
        changed = merge_patch(category, present, CATEGORY_PATCH_FIELDS)
        saved = await self.repo.save(category)
        logger.info(
            f"Category updated: {', '.join(changed) or 'no changes'}",
            extra=log_extra(category_id, actor),
        )
        return saved

    async def delete(
        self, category_id: CategoryId, actor: Principal | None = None,
    ) -> None:
        await self.get_by_id(category_id)
        await self.repo.delete_by_id(category_id)
        logger.info("Category deleted", extra=log_extra(category_id, actor))
