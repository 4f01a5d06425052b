"""Report dispatch: validates the report type, filters, builds and exports."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime, timezone
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from hrcore.core.config import ReportConfig
from hrcore.core.exceptions import ConfigError, InvalidReportType
from hrcore.models.records import LeaveRequestRecord
from hrcore.models.reports import DelimitedTable, ReportExport, ReportType
from hrcore.reports import filters
from hrcore.reports.attendance import DEFAULT_LATE_HOUR, build_attendance_table
from hrcore.reports.leave import build_leave_table
from hrcore.reports.payroll import build_payroll_table


def parse_report_type(value: ReportType | str) -> ReportType:
    """Coerce ``value`` to a ``ReportType`` or raise ``InvalidReportType``."""
    if isinstance(value, ReportType):
        return value
    try:
        return ReportType(str(value).strip().lower())
    except ValueError as exc:
        raise InvalidReportType(value) from exc


def report_filename(report_type: ReportType, on: date) -> str:
    return f"{report_type.value}_report_{on.isoformat()}.csv"


class ReportAggregator:
    """Stateless builder for the attendance, payroll and leave reports.

    Holds only its immutable options, so one instance can serve concurrent
    requests.
    """

    def __init__(
        self,
        *,
        late_hour: int = DEFAULT_LATE_HOUR,
        timezone_name: Optional[str] = None,
        all_departments_value: str = filters.ALL_DEPARTMENTS,
    ) -> None:
        self._late_hour = late_hour
        self._all_value = all_departments_value
        self._tz: Optional[ZoneInfo] = None
        if timezone_name:
            try:
                self._tz = ZoneInfo(timezone_name)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                raise ConfigError(f"Unknown report timezone {timezone_name!r}") from exc

    @classmethod
    def from_config(cls, config: ReportConfig) -> ReportAggregator:
        return cls(
            late_hour=config.late_threshold_hour,
            timezone_name=config.timezone,
            all_departments_value=config.all_departments_value,
        )

    def build(
        self,
        report_type: ReportType | str,
        records: Sequence[Any],
        department_id: Optional[str] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        *,
        leave_requests: Sequence[LeaveRequestRecord] = (),
    ) -> DelimitedTable:
        """Build one report table.

        For LEAVE, ``records`` are the balance rows and ``leave_requests`` the
        requests counted as pending.

        Raises:
            InvalidReportType: before any record is processed.
        """
        kind = parse_report_type(report_type)

        if kind is ReportType.ATTENDANCE:
            rows = filters.filter_attendance(
                records, department_id, date_from, date_to, all_value=self._all_value,
            )
            return build_attendance_table(rows, late_hour=self._late_hour, tz=self._tz)

        if kind is ReportType.PAYROLL:
            rows = filters.filter_payslips(
                records, department_id, date_from, date_to, all_value=self._all_value,
            )
            return build_payroll_table(rows)

        balances = filters.filter_leave_balances(records, department_id, all_value=self._all_value)
        requests = filters.filter_leave_requests(leave_requests, date_from, date_to)
        return build_leave_table(balances, requests)

    def export(
        self,
        report_type: ReportType | str,
        records: Sequence[Any],
        department_id: Optional[str] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        *,
        leave_requests: Sequence[LeaveRequestRecord] = (),
        today: Optional[date] = None,
    ) -> ReportExport:
        """Build a report and package it as a downloadable CSV payload."""
        kind = parse_report_type(report_type)
        table = self.build(
            kind, records, department_id, date_from, date_to, leave_requests=leave_requests,
        )
        on = today or datetime.now(timezone.utc).date()
        return ReportExport(
            report_type=kind,
            filename=report_filename(kind, on),
            content=table.to_csv(),
            row_count=len(table.rows),
            generated_on=on,
        )
