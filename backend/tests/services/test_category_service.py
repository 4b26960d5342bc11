"""Category Service — use-case tests against an in-memory repository.

Tests cover:
    - create rejects an exact duplicate name before any write
    - update merge: empty patch, blank field, untouched fields, idempotence
    - update does not re-check name uniqueness (known gap kept as-is)
    - get/update/delete on a missing id raise ResourceNotFoundError
"""

import pytest

from app.core.errors import (
    BusinessRuleError, PatchValidationError, ResourceAlreadyExistsError,
    ResourceNotFoundError,
)
from app.schemas.category import CategoryCreate, CategoryUpdate
from app.services.category_service import CategoryService
from tests.services.fake_repositories import InMemoryCategoryRepository


@pytest.fixture
def repo():
    return InMemoryCategoryRepository()


@pytest.fixture
def service(repo):
    return CategoryService(repo)


async def _create(service, name="Tech", descr="Tech posts"):
    return await service.create(CategoryCreate(cat_name=name, descr=descr))


# ─── create ──────────────────────────────────────────────────────

async def test_create_assigns_id(service):
    category = await _create(service)
    assert category.id == 1
    assert category.cat_name == "Tech"


async def test_create_duplicate_name_conflicts_without_write(service, repo):
    await _create(service)
    with pytest.raises(ResourceAlreadyExistsError) as exc:
        await _create(service, descr="other")
    assert "already exists" in exc.value.message
    assert repo.saves == 1


async def test_create_name_match_is_exact(service):
    await _create(service)
    other = await _create(service, name="tech")
    assert other.id == 2


# ─── update ──────────────────────────────────────────────────────

async def test_update_empty_patch_rejected(service, repo):
    category = await _create(service)
    with pytest.raises(BusinessRuleError):
        await service.update(category.id, CategoryUpdate())
    assert repo.saves == 1


async def test_update_blank_name_rejected_and_entity_untouched(service, repo):
    category = await _create(service)
    with pytest.raises(PatchValidationError) as exc:
        await service.update(
            category.id, CategoryUpdate.model_validate({"catName": "", "descr": "new"}),
        )
    assert set(exc.value.field_errors) == {"catName"}
    stored = repo.rows[category.id]
    assert (stored.cat_name, stored.descr) == ("Tech", "Tech posts")


async def test_update_descr_only_keeps_name(service):
    category = await _create(service)
    updated = await service.update(
        category.id, CategoryUpdate.model_validate({"descr": "x"}),
    )
    assert updated.cat_name == "Tech"
    assert updated.descr == "x"


async def test_update_twice_yields_same_state(service, repo):
    category = await _create(service)
    patch = CategoryUpdate.model_validate({"catName": "Science"})
    first = await service.update(category.id, patch)
    snapshot = (first.id, first.cat_name, first.descr)
    second = await service.update(category.id, patch)
    assert (second.id, second.cat_name, second.descr) == snapshot


async def test_update_can_duplicate_another_name(service):
    await _create(service, name="Tech")
    other = await _create(service, name="Science")
    updated = await service.update(
        other.id, CategoryUpdate.model_validate({"catName": "Tech"}),
    )
    assert updated.cat_name == "Tech"


async def test_update_missing_id_not_found_before_patch_checks(service):
    with pytest.raises(ResourceNotFoundError) as exc:
        await service.update(42, CategoryUpdate())
    assert exc.value.message == "Category with id 42 not found."


# ─── get / list / delete ─────────────────────────────────────────

async def test_list_returns_all(service):
    await _create(service, name="A")
    await _create(service, name="B")
    assert [c.cat_name for c in await service.list_all()] == ["A", "B"]


async def test_delete_removes(service, repo):
    category = await _create(service)
    await service.delete(category.id)
    assert category.id not in repo.rows


async def test_delete_missing_id_not_found(service):
    with pytest.raises(ResourceNotFoundError):
        await service.delete(7)
