"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell (infrastructure/repositories.py) via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions (access_rules, patch_merge) are never async —
      the services orchestrate the async calls around the pure logic
    - Repositories hand back ORM-shaped entities (AuthorLike / CategoryLike):
      services mutate them in memory and pass them back to save()
"""

from typing import Protocol, Sequence

from app.core.domain_types import (
    AuthorId, CategoryId, Principal, SessionToken,
)


class AuthorLike(Protocol):
    """Structural contract for Author entities handled by AuthorService."""
    id: int
    name: str
    email: str
    about: str
    role: str


class CategoryLike(Protocol):
    """Structural contract for Category entities handled by CategoryService."""
    id: int
    cat_name: str
    descr: str


class SessionLookup(Protocol):
    """Resolves an opaque session token to a principal — implemented by shell.

    Returns None for unknown or expired sessions and for sessions that were
    never bound to a user.
    """
    async def resolve(self, session_id: SessionToken) -> Principal | None: ...


class AuthorRepository(Protocol):
    """Contract for author persistence — implemented by shell."""
    def new(self, name: str, email: str, about: str) -> AuthorLike: ...
    async def find_by_id(self, author_id: AuthorId) -> AuthorLike | None: ...
    async def find_all(self) -> Sequence[AuthorLike]: ...
    async def save(self, author: AuthorLike) -> AuthorLike: ...
    async def delete_by_id(self, author_id: AuthorId) -> None: ...


class CategoryRepository(Protocol):
    """Contract for category persistence — implemented by shell."""
    def new(self, cat_name: str, descr: str) -> CategoryLike: ...
    async def find_by_id(self, category_id: CategoryId) -> CategoryLike | None: ...
    async def find_all(self) -> Sequence[CategoryLike]: ...
    async def save(self, category: CategoryLike) -> CategoryLike: ...
    async def delete_by_id(self, category_id: CategoryId) -> None: ...
    async def exists_by_name(self, cat_name: str) -> bool: ...
