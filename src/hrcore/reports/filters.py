"""Department and date pre-filters shared by all report builders."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import Optional

from hrcore.models.records import (
    AttendanceRecord,
    LeaveBalanceRecord,
    LeaveRequestRecord,
    PayslipRecord,
)

ALL_DEPARTMENTS = "all"


def department_matches(
    record_department_id: Optional[str],
    department_id: Optional[str],
    *,
    all_value: str = ALL_DEPARTMENTS,
) -> bool:
    if not department_id or not department_id.strip() or department_id == all_value:
        return True
    return record_department_id == department_id


def date_bounds_active(date_from: Optional[date], date_to: Optional[date]) -> bool:
    """The date filter applies only when both bounds are supplied."""
    return date_from is not None and date_to is not None


def filter_attendance(
    records: Iterable[AttendanceRecord],
    department_id: Optional[str] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    *,
    all_value: str = ALL_DEPARTMENTS,
) -> list[AttendanceRecord]:
    bounded = date_bounds_active(date_from, date_to)
    return [
        r for r in records
        if department_matches(r.department_id, department_id, all_value=all_value)
        and (not bounded or date_from <= r.date <= date_to)
    ]


def filter_payslips(
    records: Iterable[PayslipRecord],
    department_id: Optional[str] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    *,
    all_value: str = ALL_DEPARTMENTS,
) -> list[PayslipRecord]:
    bounded = date_bounds_active(date_from, date_to)
    return [
        r for r in records
        if department_matches(r.department_id, department_id, all_value=all_value)
        and (not bounded or (date_from <= r.period_start and r.period_end <= date_to))
    ]


def filter_leave_balances(
    records: Iterable[LeaveBalanceRecord],
    department_id: Optional[str] = None,
    *,
    all_value: str = ALL_DEPARTMENTS,
) -> list[LeaveBalanceRecord]:
    return [
        r for r in records
        if department_matches(r.department_id, department_id, all_value=all_value)
    ]


def filter_leave_requests(
    records: Iterable[LeaveRequestRecord],
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
) -> list[LeaveRequestRecord]:
    if not date_bounds_active(date_from, date_to):
        return list(records)
    return [r for r in records if date_from <= r.start_date and r.end_date <= date_to]
