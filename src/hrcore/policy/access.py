"""Role-tier helpers and employee-data scoping."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from hrcore.core.types import EmployeeId
from hrcore.models.principal import Principal, Role

ADMIN_ROLES = frozenset({Role.ADMIN})
HR_ROLES = frozenset({Role.ADMIN, Role.HR})
MANAGER_ROLES = frozenset({Role.ADMIN, Role.HR, Role.MANAGER})


def require_role(role: Role, required_roles: Iterable[Role]) -> bool:
    return role in frozenset(required_roles)


def require_admin(role: Role) -> bool:
    return require_role(role, ADMIN_ROLES)


def require_hr(role: Role) -> bool:
    return require_role(role, HR_ROLES)


def require_manager(role: Role) -> bool:
    return require_role(role, MANAGER_ROLES)


def role_tiers(role: Role) -> dict[str, bool]:
    """Which coarse role tiers ``role`` satisfies, keyed by tier name."""
    return {
        "admin": require_admin(role),
        "hr": require_hr(role),
        "manager": require_manager(role),
    }


def can_access_employee_data(principal: Principal, target_employee_id: Optional[EmployeeId]) -> bool:
    """Whether ``principal`` may read data belonging to ``target_employee_id``.

    ADMIN and HR see everyone. Managers are admitted here and narrowed to
    their direct reports by the persistence collaborator. Employees see only
    their own records.
    """
    if principal.role in HR_ROLES:
        return True
    if principal.role == Role.MANAGER:
        return True
    return principal.employee_id is not None and principal.employee_id == target_employee_id
