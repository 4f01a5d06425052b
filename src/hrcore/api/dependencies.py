"""Request-scoped dependencies: principal resolution and app-state accessors."""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from hrcore.api.errors import ApiError
from hrcore.core.config import AppSettings
from hrcore.core.protocols import IRecordSource
from hrcore.models.principal import Principal
from hrcore.policy.catalog import PermissionCatalog
from hrcore.policy.engine import PolicyEngine
from hrcore.reports.aggregator import ReportAggregator

bearer_scheme = HTTPBearer(auto_error=False)


def resolve_principal(request: Request, token: Optional[str] = None) -> Optional[Principal]:
    """Look up the caller from a bearer token or the session cookie."""
    if token is None:
        header = request.headers.get("authorization", "")
        scheme, _, value = header.partition(" ")
        if scheme.lower() == "bearer" and value:
            token = value.strip()
    if token is None:
        settings: AppSettings = request.app.state.settings
        token = request.cookies.get(settings.api.session_cookie)
    if not token:
        return None
    return request.app.state.authenticator.authenticate(token)


def get_optional_principal(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[Principal]:
    token = credentials.credentials if credentials is not None else None
    return resolve_principal(request, token)


def get_principal(principal: Optional[Principal] = Depends(get_optional_principal)) -> Principal:
    if principal is None:
        raise ApiError(status_code=401, code="UNAUTHORIZED", message="Unauthorized")
    return principal


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_catalog(request: Request) -> PermissionCatalog:
    return request.app.state.catalog


def get_policy_engine(request: Request) -> PolicyEngine:
    return request.app.state.policy_engine


def get_aggregator(request: Request) -> ReportAggregator:
    return request.app.state.aggregator


def get_record_source(request: Request) -> IRecordSource:
    return request.app.state.record_source


def ensure_capability(principal: Principal, catalog: PermissionCatalog, capability: str) -> None:
    if not catalog.has_capability(principal.role, capability):
        raise ApiError(status_code=403, code="FORBIDDEN", message="Forbidden")
