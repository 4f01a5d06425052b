"""Page gate: runs every non-excluded request through the policy engine."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from fastapi import Request, Response
from fastapi.responses import RedirectResponse

from hrcore.api.dependencies import resolve_principal
from hrcore.core.config import AppSettings
from hrcore.models.policy import Decision

logger = logging.getLogger(__name__)


def _under_prefix(path: str, prefix: str) -> bool:
    base = prefix.rstrip("/")
    return path == base or path.startswith(base + "/")


async def policy_gate(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    settings: AppSettings = request.app.state.settings
    path = request.url.path
    if any(_under_prefix(path, prefix) for prefix in settings.policy.gate_excluded_prefixes):
        return await call_next(request)

    principal = resolve_principal(request)
    decision = request.app.state.policy_engine.authorize(principal, path)

    if decision is Decision.DENY_UNAUTHENTICATED:
        logger.info("Unauthenticated request redirected", extra={"path": path})
        return RedirectResponse(settings.policy.login_path)
    if decision is Decision.DENY_FORBIDDEN:
        logger.warning(
            "Forbidden request redirected",
            extra={"path": path, "principal_id": principal.id, "role": principal.role.value},
        )
        return RedirectResponse(settings.policy.unauthorized_path)
    return await call_next(request)
