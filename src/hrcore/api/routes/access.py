"""Caller introspection endpoints used by UI guards."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from hrcore.api.dependencies import (
    get_catalog,
    get_optional_principal,
    get_policy_engine,
    get_principal,
)
from hrcore.models.principal import Principal
from hrcore.policy.access import can_access_employee_data, role_tiers
from hrcore.policy.catalog import PermissionCatalog
from hrcore.policy.engine import PolicyEngine

router = APIRouter(tags=["access"])


@router.get("/me")
def me(
    principal: Principal = Depends(get_principal),
    catalog: PermissionCatalog = Depends(get_catalog),
) -> dict:
    return {
        "id": principal.id,
        "email": principal.email,
        "role": principal.role.value,
        "employeeId": principal.employee_id,
        "capabilities": catalog.capabilities_for(principal),
        "tiers": role_tiers(principal.role),
    }


@router.get("/access")
def access_decision(
    path: str = Query(..., min_length=1),
    principal: Optional[Principal] = Depends(get_optional_principal),
    engine: PolicyEngine = Depends(get_policy_engine),
) -> dict[str, str]:
    """The decision the page gate would take for the caller on ``path``."""
    return {"path": path, "decision": engine.authorize(principal, path).value}


@router.get("/employees/{employee_id}/access")
def employee_data_access(
    employee_id: str,
    principal: Principal = Depends(get_principal),
) -> dict:
    return {
        "employeeId": employee_id,
        "allowed": can_access_employee_data(principal, employee_id),
    }
