"""Session Auth Middleware — runs the Authorization Gate on every API request.

Invariants:
    - Every path under /api except /api/health goes through the gate
    - Session id read from the session cookie, then the session header
    - Unauthenticated → 401 {"error": ...}; Forbidden → 403 {"error": ...};
      nothing downstream runs for a rejected request
    - OPTIONS is answered 200 here without a lookup scope or routing; CORS
      preflights never get this far because CORSMiddleware answers them first
    - Allowed requests carry the principal on request.state.principal
    - The session token itself is never logged

Design Decisions:
    - Middleware over a route dependency: the gate runs before body binding,
      so an unauthorized caller learns nothing about payload validation
    - Lookup session opened from db_manager at request time: tests swap the
      manager exactly as they do for get_db
"""

import logging
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import AsyncIterator, Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import JSONResponse, Response

from app.api.error_handlers import translate_error
from app.core.access_rules import (
    AccessRule, DEFAULT_ACCESS_RULES, Forbidden, Unauthenticated,
    is_preflight,
)
from app.core.domain_types import Principal
from app.core.errors import (
    AuthenticationRequiredError, BlogHubError, PermissionDeniedError,
)
from app.core.repository_protocols import SessionLookup
from app.infrastructure.database import get_db_manager
from app.infrastructure.session_store import SqlSessionLookup
from app.services.authorization_gate import AuthorizationGate

logger = logging.getLogger(__name__)

API_PREFIX = "/api"
PUBLIC_PREFIXES = ("/api/health",)
ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"


def is_guarded(path: str) -> bool:
    return path.startswith(API_PREFIX) and not path.startswith(PUBLIC_PREFIXES)


@asynccontextmanager
async def sql_session_lookup() -> AsyncIterator[SessionLookup]:
    async with get_db_manager().session() as db:
        yield SqlSessionLookup(db)


class SessionAuthMiddleware(BaseHTTPMiddleware):
    """Reject requests the Authorization Gate does not allow."""

    def __init__(
        self,
        app,
        cookie_name: str,
        header_name: str,
        rules: tuple[AccessRule, ...] = DEFAULT_ACCESS_RULES,
        lookup_scope: Callable[
            [], AbstractAsyncContextManager[SessionLookup]
        ] = sql_session_lookup,
    ) -> None:
        super().__init__(app)
        self.cookie_name = cookie_name
        self.header_name = header_name
        self.rules = rules
        self.lookup_scope = lookup_scope

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        path = request.url.path
        if not is_guarded(path):
            return await call_next(request)
        if is_preflight(request.method):
            return Response(status_code=200, headers={"Allow": ALLOWED_METHODS})

        session_id = (
            request.cookies.get(self.cookie_name)
            or request.headers.get(self.header_name)
        )
        try:
            async with self.lookup_scope() as lookup:
                decision = await AuthorizationGate(lookup, self.rules).authorize(
                    request.method, path, session_id,
                )
        except BlogHubError as exc:
            logger.error(
                f"Session lookup failed: {exc.message}",
                extra={"error_code": exc.code, "path": path},
            )
            return _reject(exc)

        if isinstance(decision, Unauthenticated):
            logger.warning(
                "Rejected unauthenticated request",
                extra={"path": path, "method": request.method},
            )
            return _reject(AuthenticationRequiredError())
        if isinstance(decision, Forbidden):
            logger.warning(
                f"Rejected request: requires role {decision.rule.required_role.value}",
                extra={
                    "path": path, "method": request.method,
                    "user_id": decision.principal.user_id,
                    "role": decision.principal.role,
                },
            )
            return _reject(PermissionDeniedError())

        request.state.principal = decision.principal
        return await call_next(request)


def _reject(exc: BlogHubError) -> JSONResponse:
    status_code, body = translate_error(exc)
    return JSONResponse(status_code=status_code, content=body)


def get_current_principal(request: Request) -> Principal:
    """Route dependency: the principal the gate attached. Fail-closed if absent."""
    principal = getattr(request.state, "principal", None)
    if principal is None:
        raise AuthenticationRequiredError()
    return principal
