"""Protocol interfaces for the external collaborators of the HR core.

The core never authenticates callers or queries storage itself; the transport
layer resolves both through these Protocols.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, runtime_checkable

from hrcore.core.types import DepartmentId
from hrcore.models.principal import Principal
from hrcore.models.records import (
    AttendanceRecord,
    LeaveBalanceRecord,
    LeaveRequestRecord,
    PayslipRecord,
)


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------

@runtime_checkable
class IAuthenticator(Protocol):
    """Resolves a verified session token or credential to a Principal."""

    def authenticate(self, token: str) -> Optional[Principal]: ...


# ---------------------------------------------------------------------------
# Persistence: Report Records
# ---------------------------------------------------------------------------

@runtime_checkable
class IRecordSource(Protocol):
    """Supplies report input records, pre-filtered as far as storage allows.

    Sequences are returned in report order: attendance and payslips most
    recent first.
    """

    def attendance_records(
        self, department_id: Optional[DepartmentId], date_from: Optional[date], date_to: Optional[date]
    ) -> list[AttendanceRecord]: ...

    def payslip_records(
        self, department_id: Optional[DepartmentId], date_from: Optional[date], date_to: Optional[date]
    ) -> list[PayslipRecord]: ...

    def leave_balances(self, department_id: Optional[DepartmentId]) -> list[LeaveBalanceRecord]: ...

    def leave_requests(
        self, date_from: Optional[date], date_to: Optional[date]
    ) -> list[LeaveRequestRecord]: ...
