"""Tests for the leave balance report."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from hrcore.models.records import LeaveBalanceRecord, LeaveRequestRecord, LeaveStatus
from hrcore.reports.leave import LEAVE_HEADER, build_leave_table, count_pending


def _balance(employee_id: str, leave_type_id: str, leave_type_name: str) -> LeaveBalanceRecord:
    return LeaveBalanceRecord(
        employee_id=employee_id,
        employee_name=f"Employee {employee_id}",
        department_name="Operations",
        department_id="D3",
        leave_type_id=leave_type_id,
        leave_type_name=leave_type_name,
        total_days=Decimal("20"),
        used_days=Decimal("5"),
        remaining_days=Decimal("15"),
    )


def _request(employee_id: str, leave_type_id: str, status: LeaveStatus) -> LeaveRequestRecord:
    return LeaveRequestRecord(
        employee_id=employee_id,
        leave_type_id=leave_type_id,
        status=status,
        start_date=date(2024, 6, 3),
        end_date=date(2024, 6, 5),
    )


def test_pending_requests_counted_per_balance():
    balances = [_balance("E1", "ANNUAL", "Annual Leave")]
    requests = [
        _request("E1", "ANNUAL", LeaveStatus.PENDING),
        _request("E1", "ANNUAL", LeaveStatus.APPROVED),
        _request("E1", "ANNUAL", LeaveStatus.PENDING),
    ]
    table = build_leave_table(balances, requests)
    assert table.header == LEAVE_HEADER
    assert table.rows == (("Employee E1", "Operations", "Annual Leave", "20", "5", "15", "2"),)


def test_requests_for_other_type_or_employee_ignored():
    balances = [_balance("E1", "ANNUAL", "Annual Leave"), _balance("E1", "SICK", "Sick Leave")]
    requests = [
        _request("E1", "SICK", LeaveStatus.PENDING),
        _request("E2", "ANNUAL", LeaveStatus.PENDING),
    ]
    rows = build_leave_table(balances, requests).rows
    assert [row[-1] for row in rows] == ["0", "1"]


def test_rows_driven_by_balances_not_requests():
    requests = [_request("E9", "ANNUAL", LeaveStatus.PENDING)]
    assert build_leave_table([], requests).rows == ()


def test_count_pending_ignores_resolved_statuses():
    requests = [
        _request("E1", "ANNUAL", LeaveStatus.REJECTED),
        _request("E1", "ANNUAL", LeaveStatus.CANCELLED),
    ]
    assert count_pending(requests)[("E1", "ANNUAL")] == 0
