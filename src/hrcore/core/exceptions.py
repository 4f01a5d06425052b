"""HR core exception hierarchy.

Access decisions are not exceptions; see ``hrcore.models.policy.Decision``.
"""

from __future__ import annotations


class HRCoreError(Exception):
    """Base exception for all HR core errors."""


class ConfigError(HRCoreError):
    """Static table entry is missing or malformed. Fatal at startup."""


class InvalidReportType(HRCoreError):
    """Caller asked for a report type outside attendance, payroll, leave."""

    def __init__(self, report_type: object) -> None:
        self.report_type = report_type
        super().__init__(f"Invalid report type: {report_type!r}")
