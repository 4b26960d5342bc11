"""Author Routes — CRUD endpoints for blog authors.

Invariants:
    - Any authenticated principal may call every endpoint (no role rule for authors)
    - DELETE echoes the removed author
    - Handlers contain no business logic: AuthorService owns every rule
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.session_auth import get_current_principal
from app.core.domain_types import AuthorId, Principal
from app.infrastructure.database import get_db
from app.infrastructure.repositories import SqlAuthorRepository
from app.schemas.author import AuthorCreate, AuthorResponse, AuthorUpdate
from app.services.author_service import AuthorService

router = APIRouter(prefix="/api/authors", tags=["authors"])


def get_author_service(db: AsyncSession = Depends(get_db)) -> AuthorService:
    return AuthorService(SqlAuthorRepository(db))


@router.post(
    "", response_model=AuthorResponse, status_code=status.HTTP_201_CREATED,
)
async def create_author(
    body: AuthorCreate,
    service: AuthorService = Depends(get_author_service),
    principal: Principal = Depends(get_current_principal),
):
    return AuthorResponse.model_validate(
        await service.create(body, actor=principal),
    )


@router.get("", response_model=list[AuthorResponse])
async def list_authors(service: AuthorService = Depends(get_author_service)):
    return [AuthorResponse.model_validate(a) for a in await service.list_all()]


@router.get("/{author_id}", response_model=AuthorResponse)
async def get_author(
    author_id: int,
    service: AuthorService = Depends(get_author_service),
):
    return AuthorResponse.model_validate(
        await service.get_by_id(AuthorId(author_id)),
    )


@router.put("/{author_id}", response_model=AuthorResponse)
async def update_author(
    author_id: int,
    body: AuthorUpdate,
    service: AuthorService = Depends(get_author_service),
    principal: Principal = Depends(get_current_principal),
):
    return AuthorResponse.model_validate(
        await service.update(AuthorId(author_id), body, actor=principal),
    )


@router.delete("/{author_id}", response_model=AuthorResponse)
async def delete_author(
    author_id: int,
    service: AuthorService = Depends(get_author_service),
    principal: Principal = Depends(get_current_principal),
):
    return AuthorResponse.model_validate(
        await service.delete(AuthorId(author_id), actor=principal),
    )
