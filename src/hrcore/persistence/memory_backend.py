"""In-memory collaborators for local development and tests: list-backed fakes."""

from __future__ import annotations

from datetime import date
from typing import Optional

from hrcore.models.principal import Principal
from hrcore.models.records import (
    AttendanceRecord,
    LeaveBalanceRecord,
    LeaveRequestRecord,
    PayslipRecord,
)


class MemoryAuthenticator:
    """Token-table IAuthenticator."""

    def __init__(self, tokens: dict[str, Principal] | None = None) -> None:
        self._tokens: dict[str, Principal] = dict(tokens or {})

    def register(self, token: str, principal: Principal) -> None:
        self._tokens[token] = principal

    def authenticate(self, token: str) -> Optional[Principal]:
        return self._tokens.get(token)


class MemoryRecordSource:
    """List-backed IRecordSource.

    Returns every stored record; the report aggregator applies the
    department and date filters itself.
    """

    def __init__(
        self,
        *,
        attendance: list[AttendanceRecord] | None = None,
        payslips: list[PayslipRecord] | None = None,
        balances: list[LeaveBalanceRecord] | None = None,
        requests: list[LeaveRequestRecord] | None = None,
    ) -> None:
        self.attendance: list[AttendanceRecord] = list(attendance or [])
        self.payslips: list[PayslipRecord] = list(payslips or [])
        self.balances: list[LeaveBalanceRecord] = list(balances or [])
        self.requests: list[LeaveRequestRecord] = list(requests or [])

    def attendance_records(
        self, department_id: Optional[str], date_from: Optional[date], date_to: Optional[date]
    ) -> list[AttendanceRecord]:
        return list(self.attendance)

    def payslip_records(
        self, department_id: Optional[str], date_from: Optional[date], date_to: Optional[date]
    ) -> list[PayslipRecord]:
        return list(self.payslips)

    def leave_balances(self, department_id: Optional[str]) -> list[LeaveBalanceRecord]:
        return list(self.balances)

    def leave_requests(
        self, date_from: Optional[date], date_to: Optional[date]
    ) -> list[LeaveRequestRecord]:
        return list(self.requests)
