"""Access Rules — pure request authorization decision procedure.

Invariants:
    - All functions are PURE: no IO, no async, no side effects
    - OPTIONS (CORS preflight) is always Allow(None) — checked before anything else
    - Missing principal is Unauthenticated, decided before any path/role rule
    - Rules are evaluated in order; first rule whose prefix and method match wins
    - A request no rule matches only needs authentication
    - Exactly three outcomes: Allow, Unauthenticated, Forbidden

Design Decisions:
    - Declarative AccessRule list over a hard-coded path check: new restrictions
      are new list entries, decide_access never changes
    - Rules name the methods they EXEMPT (GET only), so HEAD, PATCH, TRACE and
      other verbs fall under the restriction instead of slipping past it
    - Prefix match mirrors the servlet-style startswith check: fail-closed for
      any path under the prefix
"""

from dataclasses import dataclass, field

from app.core.domain_types import HttpMethod, Principal, READ_METHODS, Role


@dataclass(frozen=True)
class AccessRule:
    """Require `required_role` for non-exempt methods under `path_prefix`."""
    path_prefix: str
    required_role: Role
    exempt_methods: frozenset[str] = field(default=READ_METHODS)

    def applies_to(self, method: str, path: str) -> bool:
        return (
            path.startswith(self.path_prefix)
            and method not in self.exempt_methods
        )


# ─── Decisions ───────────────────────────────────────────────────

@dataclass(frozen=True)
class Allow:
    principal: Principal | None


@dataclass(frozen=True)
class Unauthenticated:
    pass


@dataclass(frozen=True)
class Forbidden:
    principal: Principal
    rule: AccessRule


Decision = Allow | Unauthenticated | Forbidden


DEFAULT_ACCESS_RULES: tuple[AccessRule, ...] = (
    AccessRule("/api/categories", Role.ADMIN),
)


def is_preflight(method: str) -> bool:
    return method.upper() == HttpMethod.OPTIONS


def decide_access(
    method: str,
    path: str,
    principal: Principal | None,
    rules: tuple[AccessRule, ...] = DEFAULT_ACCESS_RULES,
) -> Decision:
    """Decide whether a request may proceed.

    `principal` is the already-resolved session identity, or None when the
    session is missing, unknown, expired or carries no user.
    """
    method = method.upper()
    if is_preflight(method):
        return Allow(None)
    if principal is None:
        return Unauthenticated()
    for rule in rules:
        if rule.applies_to(method, path):
            if principal.role != rule.required_role:
                return Forbidden(principal, rule)
            break
    return Allow(principal)
