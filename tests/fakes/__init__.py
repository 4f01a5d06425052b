"""Shared test doubles: re-export memory collaborators."""

from __future__ import annotations

from hrcore.models.principal import Role
from hrcore.persistence.memory_backend import MemoryAuthenticator, MemoryRecordSource

# One bearer token per role, registered by the integration fixtures
TOKENS: dict[Role, str] = {role: f"token-{role.value.lower()}" for role in Role}


def bearer(role: Role) -> dict[str, str]:
    return {"Authorization": f"Bearer {TOKENS[role]}"}


__all__ = ["MemoryAuthenticator", "MemoryRecordSource", "TOKENS", "bearer"]
