"""Sparse Patch Merge — pure validation and merge of partial-update payloads.

Invariants:
    - All functions are PURE apart from merge_patch mutating the entity it is given
    - A patch is a mapping of PRESENT fields only; absence means "leave unchanged"
    - Empty patch -> BusinessRuleError (never a silent no-op success)
    - Present field that is None or blank -> PatchValidationError naming that field;
      every offending field is reported, not just the first
    - merge_patch runs only after both checks pass, so a failed update never
      leaves a half-merged entity behind

Design Decisions:
    - Presence is decided by the caller from pydantic's model_fields_set, not by
      a None sentinel: {"name": ""} and {} are different requests
    - PatchField carries the wire label (catName) next to the attribute name
      (cat_name) so error maps use the names the client sent
"""

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from app.core.errors import BusinessRuleError, PatchValidationError


@dataclass(frozen=True)
class PatchField:
    attr: str
    label: str
    required: bool = True


def present_labels(fields: Sequence[PatchField]) -> str:
    """'a or b' / 'a, b or c' for user-facing messages."""
    labels = [f.label for f in fields]
    if len(labels) == 1:
        return labels[0]
    return f"{', '.join(labels[:-1])} or {labels[-1]}"


def require_any_field(
    patch: Mapping[str, Any], fields: Sequence[PatchField],
) -> None:
    """Reject a patch that touches none of the patchable fields."""
    if not any(f.attr in patch for f in fields):
        raise BusinessRuleError(
            f"At least one field ({present_labels(fields)}) "
            f"must be provided for update.",
        )


def find_blank_fields(
    patch: Mapping[str, Any], fields: Sequence[PatchField],
) -> dict[str, str]:
    """Return label -> message for every touched required field that is None/blank."""
    errors: dict[str, str] = {}
    for f in fields:
        if not f.required or f.attr not in patch:
            continue
        value = patch[f.attr]
        if value is None:
            errors[f.label] = f"{f.label} must not be null"
        elif isinstance(value, str) and not value.strip():
            errors[f.label] = f"{f.label} must not be blank"
    return errors


def validate_patch(
    patch: Mapping[str, Any], fields: Sequence[PatchField],
) -> None:
    """Emptiness check, then per-field validation-on-touch."""
    require_any_field(patch, fields)
    errors = find_blank_fields(patch, fields)
    if errors:
        raise PatchValidationError(errors)


def merge_patch(
    entity: Any, patch: Mapping[str, Any], fields: Sequence[PatchField],
) -> list[str]:
    """Overwrite touched attributes on `entity`. Returns the attrs that changed."""
    changed = []
    for f in fields:
        if f.attr not in patch:
            continue
        if getattr(entity, f.attr) != patch[f.attr]:
            changed.append(f.attr)
        setattr(entity, f.attr, patch[f.attr])
    return changed
