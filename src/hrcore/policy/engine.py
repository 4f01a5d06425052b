"""Route gatekeeping for (principal, request path) pairs.

Evaluation:

1. Public paths always ALLOW.
2. No principal: DENY_UNAUTHENTICATED.
3. Every route rule whose prefixes match the path must admit the principal's
   role (conjunction across rules); the first failing rule yields
   DENY_FORBIDDEN.
4. A path matched by no rule is ALLOW once a principal exists.

The engine holds only immutable tables and is safe to share across threads.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from hrcore.models.policy import Decision, RouteRule
from hrcore.models.principal import Principal, Role

PUBLIC_PREFIXES: tuple[str, ...] = ("/login", "/register")
PUBLIC_EXACT_PATHS: frozenset[str] = frozenset({"/"})

_ALL_ROLES = frozenset(Role)

DEFAULT_ROUTE_RULES: tuple[RouteRule, ...] = (
    RouteRule(
        path_prefixes=("/admin",),
        allowed_roles=frozenset({Role.ADMIN}),
    ),
    RouteRule(
        path_prefixes=("/people", "/leave", "/attendance"),
        allowed_roles=frozenset({Role.ADMIN, Role.HR}),
    ),
    RouteRule(
        path_prefixes=("/people", "/attendance", "/reports"),
        allowed_roles=frozenset({Role.ADMIN, Role.HR, Role.MANAGER}),
    ),
    RouteRule(
        path_prefixes=("/attendance", "/leave"),
        allowed_roles=_ALL_ROLES,
    ),
)


class PolicyEngine:
    """Pure decision function over a fixed public whitelist and rule list."""

    def __init__(
        self,
        rules: Iterable[RouteRule] = DEFAULT_ROUTE_RULES,
        *,
        public_prefixes: Iterable[str] = PUBLIC_PREFIXES,
        public_exact_paths: Iterable[str] = PUBLIC_EXACT_PATHS,
    ) -> None:
        self._rules = tuple(rules)
        self._public_prefixes = tuple(public_prefixes)
        self._public_exact = frozenset(public_exact_paths)

    @property
    def rules(self) -> tuple[RouteRule, ...]:
        return self._rules

    def is_public(self, path: str) -> bool:
        if path in self._public_exact:
            return True
        return any(path.startswith(prefix) for prefix in self._public_prefixes)

    def matching_rules(self, path: str) -> list[RouteRule]:
        return [rule for rule in self._rules if rule.matches(path)]

    def authorize(self, principal: Optional[Principal], path: str) -> Decision:
        if self.is_public(path):
            return Decision.ALLOW
        if principal is None:
            return Decision.DENY_UNAUTHENTICATED
        for rule in self._rules:
            if rule.matches(path) and not rule.permits(principal.role):
                return Decision.DENY_FORBIDDEN
        # Unlisted paths are open to any signed-in principal.
        return Decision.ALLOW
