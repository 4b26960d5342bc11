"""Log extras shared by the resource services."""

from app.core.domain_types import Principal


def log_extra(entity_id: int, actor: Principal | None) -> dict:
    """Structured logging extras: entity id plus the acting principal, if any."""
    extra: dict = {"entity_id": entity_id}
    if actor is not None:
        extra["user_id"] = actor.user_id
        extra["role"] = actor.role
    return extra
