"""Category Routes — CRUD endpoints for blog categories.

Invariants:
    - Writes (POST/PUT/DELETE) reach these handlers only for ADMIN principals
      (enforced by SessionAuthMiddleware, not here)
    - Wire field names are catName / descr
    - Handlers contain no business logic: CategoryService owns every rule

Design Decisions:
    - PUT carries a sparse patch (CategoryUpdate): omitted fields keep their value
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.session_auth import get_current_principal
from app.core.domain_types import CategoryId, Principal
from app.infrastructure.database import get_db
from app.infrastructure.repositories import SqlCategoryRepository
from app.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from app.services.category_service import CategoryService

router = APIRouter(prefix="/api/categories", tags=["categories"])


def get_category_service(db: AsyncSession = Depends(get_db)) -> CategoryService:
    return CategoryService(SqlCategoryRepository(db))


@router.post(
    "", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED,
)
async def create_category(
    body: CategoryCreate,
    service: CategoryService = Depends(get_category_service),
    principal: Principal = Depends(get_current_principal),
):
    category = await service.create(body, actor=principal)
    return CategoryResponse.from_entity(category)


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    service: CategoryService = Depends(get_category_service),
):
    return [CategoryResponse.from_entity(c) for c in await service.list_all()]


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
):
    category = await service.get_by_id(CategoryId(category_id))
    return CategoryResponse.from_entity(category)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int,
    body: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
    principal: Principal = Depends(get_current_principal),
):
    category = await service.update(
        CategoryId(category_id), body, actor=principal,
    )
    return CategoryResponse.from_entity(category)


@router.delete("/{category_id}")
async def delete_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
    principal: Principal = Depends(get_current_principal),
):
    await service.delete(CategoryId(category_id), actor=principal)
    return {"message": "Category deleted successfully"}
