"""Role to capability catalog."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Optional

from hrcore.core.exceptions import ConfigError
from hrcore.core.types import Capability
from hrcore.models.principal import Principal, Role

DEFAULT_ROLE_CAPABILITIES: Mapping[Role, frozenset[Capability]] = MappingProxyType({
    Role.ADMIN: frozenset({
        "users.read", "users.write", "users.delete",
        "roles.read", "roles.write",
        "attendance.read", "attendance.write",
        "leave.read", "leave.write", "leave.approve",
        "payroll.read", "payroll.write",
        "reports.read", "reports.export",
        "admin.read", "admin.write",
    }),
    Role.HR: frozenset({
        "users.read", "users.write",
        "attendance.read", "attendance.write",
        "leave.read", "leave.write", "leave.approve",
        "payroll.read",
        "reports.read", "reports.export",
    }),
    Role.MANAGER: frozenset({
        "users.read",
        "attendance.read", "attendance.write",
        "leave.read", "leave.write", "leave.approve",
        "payroll.read",
        "reports.read",
    }),
    Role.EMPLOYEE: frozenset({
        "attendance.read", "attendance.write",
        "leave.read", "leave.write",
        "payroll.read",
    }),
})


class PermissionCatalog:
    """Immutable Role -> capability-set lookup.

    The table is validated once at construction: every role must have a
    non-empty capability set, otherwise ``ConfigError`` aborts startup.
    """

    def __init__(self, table: Mapping[Role, Iterable[Capability]] | None = None) -> None:
        source = DEFAULT_ROLE_CAPABILITIES if table is None else table
        frozen: dict[Role, frozenset[Capability]] = {}
        for role in Role:
            if role not in source:
                raise ConfigError(f"No capabilities configured for role {role}")
            capabilities = frozenset(source[role])
            if not capabilities:
                raise ConfigError(f"Empty capability set for role {role}")
            frozen[role] = capabilities
        self._table: Mapping[Role, frozenset[Capability]] = MappingProxyType(frozen)

    def capabilities_of(self, role: Role | str) -> frozenset[Capability]:
        try:
            return self._table[Role(role)]
        except (ValueError, KeyError) as exc:
            raise ConfigError(f"Unknown role {role!r}") from exc

    def has_capability(self, role: Role | str, capability: Capability) -> bool:
        return capability in self.capabilities_of(role)

    def has_any(self, role: Role | str, capabilities: Iterable[Capability]) -> bool:
        granted = self.capabilities_of(role)
        return any(c in granted for c in capabilities)

    def has_all(self, role: Role | str, capabilities: Iterable[Capability]) -> bool:
        granted = self.capabilities_of(role)
        return all(c in granted for c in capabilities)

    def capabilities_for(self, principal: Optional[Principal]) -> list[Capability]:
        """Sorted capabilities of a caller; empty when nobody is signed in."""
        if principal is None:
            return []
        return sorted(self.capabilities_of(principal.role))
