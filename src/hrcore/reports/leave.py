"""Leave report: one row per balance, with pending request counts."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from hrcore.models.records import LeaveBalanceRecord, LeaveRequestRecord, LeaveStatus
from hrcore.models.reports import DelimitedTable

LEAVE_HEADER: tuple[str, ...] = (
    "Employee Name",
    "Department",
    "Leave Type",
    "Total Days",
    "Used Days",
    "Remaining Days",
    "Pending Requests",
)


def count_pending(requests: Iterable[LeaveRequestRecord]) -> Counter[tuple[str, str]]:
    """Pending request counts keyed by (employee_id, leave_type_id)."""
    return Counter(
        (r.employee_id, r.leave_type_id)
        for r in requests
        if r.status == LeaveStatus.PENDING
    )


def build_leave_table(
    balances: Iterable[LeaveBalanceRecord],
    requests: Iterable[LeaveRequestRecord] = (),
) -> DelimitedTable:
    pending = count_pending(requests)
    rows = tuple(
        (
            b.employee_name,
            b.department_name,
            b.leave_type_name,
            str(b.total_days),
            str(b.used_days),
            str(b.remaining_days),
            str(pending[(b.employee_id, b.leave_type_id)]),
        )
        for b in balances
    )
    return DelimitedTable(header=LEAVE_HEADER, rows=rows)
