"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - AuthorId, CategoryId, UserId wrap ints — store-assigned, never client-chosen
    - Role values are the exact strings stored in the session store
    - Principal is immutable once resolved for a request

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - Principal.role is Role | str: unknown roles survive the lookup but never equal ADMIN
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
AuthorId = NewType("AuthorId", int)
CategoryId = NewType("CategoryId", int)
SessionToken = NewType("SessionToken", str)


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """Roles recognised by the access rules."""
    ADMIN = "ADMIN"
    USER = "USER"

    @classmethod
    def parse(cls, value: str | None) -> "Role | str | None":
        """Map a stored role string to Role, keeping unknown values as-is."""
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return value


class HttpMethod(str, Enum):
    GET = "GET"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


READ_METHODS = frozenset({HttpMethod.GET.value})


# ─── Principal ───────────────────────────────────────────────────

@dataclass(frozen=True)
class Principal:
    """Authenticated identity attached to a request after session lookup."""
    user_id: UserId
    role: Role | str | None
