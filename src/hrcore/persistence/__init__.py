"""Pluggable collaborator backends behind Protocol interfaces."""

from __future__ import annotations

from hrcore.persistence.memory_backend import MemoryAuthenticator, MemoryRecordSource


def create_persistence() -> tuple[MemoryAuthenticator, MemoryRecordSource]:
    """Create the default (in-memory) collaborators.

    Deployments inject real ``IAuthenticator`` / ``IRecordSource``
    implementations through ``create_app`` instead.

    Returns:
        Tuple of (authenticator, record_source).
    """
    return MemoryAuthenticator(), MemoryRecordSource()
