"""Access-control components wired from static tables."""

from __future__ import annotations

from hrcore.policy.catalog import PermissionCatalog
from hrcore.policy.engine import PolicyEngine


def create_policy() -> tuple[PermissionCatalog, PolicyEngine]:
    """Build the catalog and engine from the default static tables.

    Raises:
        ConfigError: if the capability table is incomplete.

    Returns:
        Tuple of (catalog, engine).
    """
    catalog = PermissionCatalog()
    engine = PolicyEngine()
    return catalog, engine
