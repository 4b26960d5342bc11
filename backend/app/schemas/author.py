"""Author Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - AuthorCreate: name >= 3 chars, valid email, about >= 1 char (all required)
    - AuthorUpdate: every field optional; presence is model_fields_set, not None
    - Validation messages are the exact strings clients receive in the 400 field map

Design Decisions:
    - PydanticCustomError over ValueError: message reaches the client without
      pydantic's "Value error, " prefix
    - Email checked with a plain pattern: no extra validator dependency for one field
"""

import re

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_core import PydanticCustomError

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _check_email(v: str | None) -> str | None:
    if v is not None and not EMAIL_PATTERN.match(v):
        raise PydanticCustomError("email", "Email should be valid")
    return v


class AuthorCreate(BaseModel):
    """Author creation payload."""
    name: str
    email: str
    about: str

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        if len(v) < 3:
            raise PydanticCustomError(
                "name_length", "Name must be at least 3 characters long",
            )
        return v

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        return _check_email(v)

    @field_validator("about")
    @classmethod
    def check_about(cls, v: str) -> str:
        if len(v) < 1:
            raise PydanticCustomError(
                "about_length",
                "About section must be at least 1 characters long",
            )
        return v


class AuthorUpdate(BaseModel):
    """Sparse author patch — omitted fields are left unchanged."""
    name: str | None = None
    email: str | None = None
    about: str | None = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str | None) -> str | None:
        if v is not None and not 2 <= len(v) <= 50:
            raise PydanticCustomError(
                "name_length", "Name must be between 2 and 50 characters",
            )
        return v

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str | None) -> str | None:
        return _check_email(v)

    @field_validator("about")
    @classmethod
    def check_about(cls, v: str | None) -> str | None:
        if v is not None and not 1 <= len(v) <= 200:
            raise PydanticCustomError(
                "about_length",
                "About section must not exceed 200 and min size 1 characters",
            )
        return v

    def present_fields(self) -> dict:
        """Only the fields the client actually sent (explicit nulls included)."""
        return {name: getattr(self, name) for name in self.model_fields_set}


class AuthorResponse(BaseModel):
    """Author response — public-facing author data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: str
    about: str
