"""Authorization Gate — resolves the session and applies the access rules.

Invariants:
    - OPTIONS never touches the session store
    - Session lookup happens before any rule is consulted (fail-closed)
    - Stateless per call: the only state is the injected SessionLookup

Design Decisions:
    - Thin async shell around core/access_rules.decide_access: the IO (lookup)
      lives here, the decision stays pure and testable without mocks
"""

from app.core.access_rules import (
    AccessRule, Allow, DEFAULT_ACCESS_RULES, Decision, decide_access,
    is_preflight,
)
from app.core.domain_types import SessionToken
from app.core.repository_protocols import SessionLookup


class AuthorizationGate:
    """Decides Allow / Unauthenticated / Forbidden for one request."""

    def __init__(
        self,
        lookup: SessionLookup,
        rules: tuple[AccessRule, ...] = DEFAULT_ACCESS_RULES,
    ):
        self.lookup = lookup
        self.rules = rules

    async def authorize(
        self, method: str, path: str, session_id: SessionToken | None,
    ) -> Decision:
        if is_preflight(method):
            return Allow(None)
        principal = None
        if session_id:
            principal = await self.lookup.resolve(session_id)
        return decide_access(method, path, principal, self.rules)
