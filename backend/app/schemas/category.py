"""Category Schemas — wire models using the catName / descr field names.

Invariants:
    - CategoryCreate: catName and descr both required and non-blank
    - CategoryUpdate: both optional; presence is model_fields_set, not None
    - Python attribute is cat_name, wire name is catName (alias) in and out

Design Decisions:
    - populate_by_name: services and tests build models with cat_name=...
    - Blank check on update lives in core/patch_merge, not here, so an absent
      field and a blank one are told apart in one place
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError


class CategoryCreate(BaseModel):
    """Category creation payload."""
    model_config = ConfigDict(populate_by_name=True)

    cat_name: str = Field(alias="catName")
    descr: str

    @field_validator("cat_name")
    @classmethod
    def check_cat_name(cls, v: str) -> str:
        if not v.strip():
            raise PydanticCustomError("blank", "Category name is required")
        return v

    @field_validator("descr")
    @classmethod
    def check_descr(cls, v: str) -> str:
        if not v.strip():
            raise PydanticCustomError(
                "blank", "Category description is required",
            )
        return v


class CategoryUpdate(BaseModel):
    """Sparse category patch."""
    model_config = ConfigDict(populate_by_name=True)

    cat_name: str | None = Field(None, alias="catName")
    descr: str | None = None

    def present_fields(self) -> dict:
        return {name: getattr(self, name) for name in self.model_fields_set}


class CategoryResponse(BaseModel):
    """Category response — serialized with the catName alias."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    cat_name: str = Field(alias="catName")
    descr: str

    @classmethod
    def from_entity(cls, category) -> "CategoryResponse":
        return cls(
            id=category.id, cat_name=category.cat_name, descr=category.descr,
        )
