"""Attendance report: per-employee presence statistics."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, tzinfo
from typing import Optional

from hrcore.models.records import AttendanceRecord
from hrcore.models.reports import DelimitedTable, EmployeeAttendanceStat

ATTENDANCE_HEADER: tuple[str, ...] = (
    "Employee Name",
    "Department",
    "Total Days",
    "Present Days",
    "Late Days",
    "Absent Days",
    "Attendance Rate (%)",
)

DEFAULT_LATE_HOUR = 9


def is_late(clock_in: datetime, *, late_hour: int = DEFAULT_LATE_HOUR, tz: Optional[tzinfo] = None) -> bool:
    """Clock-ins at or after ``late_hour`` local time are late (09:00 is late, 08:59 is not)."""
    if tz is not None and clock_in.tzinfo is not None:
        clock_in = clock_in.astimezone(tz)
    return clock_in.hour >= late_hour


def aggregate_attendance(
    records: Iterable[AttendanceRecord],
    *,
    late_hour: int = DEFAULT_LATE_HOUR,
    tz: Optional[tzinfo] = None,
) -> list[EmployeeAttendanceStat]:
    """Group records by employee, in first-seen order."""
    totals: dict[str, dict] = {}
    for record in records:
        stats = totals.get(record.employee_id)
        if stats is None:
            stats = {
                "employee_name": record.employee_name,
                "department_name": record.department_name,
                "total_days": 0,
                "present_days": 0,
                "late_days": 0,
            }
            totals[record.employee_id] = stats
        stats["total_days"] += 1
        if record.is_present:
            stats["present_days"] += 1
            if is_late(record.clock_in, late_hour=late_hour, tz=tz):
                stats["late_days"] += 1
    return [EmployeeAttendanceStat(**stats) for stats in totals.values()]


def build_attendance_table(
    records: Iterable[AttendanceRecord],
    *,
    late_hour: int = DEFAULT_LATE_HOUR,
    tz: Optional[tzinfo] = None,
) -> DelimitedTable:
    rows = tuple(
        (
            stat.employee_name,
            stat.department_name,
            str(stat.total_days),
            str(stat.present_days),
            str(stat.late_days),
            str(stat.absent_days),
            stat.attendance_rate_label,
        )
        for stat in aggregate_attendance(records, late_hour=late_hour, tz=tz)
    )
    return DelimitedTable(header=ATTENDANCE_HEADER, rows=rows)
