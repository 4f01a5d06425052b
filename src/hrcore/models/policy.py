"""Route gatekeeping models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from hrcore.models.principal import Role


class Decision(StrEnum):
    """Tri-state outcome of policy evaluation."""

    ALLOW = "ALLOW"
    DENY_UNAUTHENTICATED = "DENY_UNAUTHENTICATED"
    DENY_FORBIDDEN = "DENY_FORBIDDEN"


class RouteRule(BaseModel):
    """A (path-prefix set, allowed-role set) pair."""

    path_prefixes: tuple[str, ...]
    allowed_roles: frozenset[Role]

    model_config = {"frozen": True}

    def matches(self, path: str) -> bool:
        return any(path.startswith(prefix) for prefix in self.path_prefixes)

    def permits(self, role: Role) -> bool:
        return role in self.allowed_roles
