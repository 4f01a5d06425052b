"""Report request, derived statistics and tabular output models."""

from __future__ import annotations

import csv
import io
from datetime import date
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ReportType(StrEnum):
    ATTENDANCE = "attendance"
    PAYROLL = "payroll"
    LEAVE = "leave"


class ReportRequest(BaseModel):
    """Report parameters as posted by the client.

    ``report_type`` stays a plain string here so that an unknown value is
    reported as ``InvalidReportType`` by the aggregator, not as a schema error.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    report_type: Optional[str] = None
    department_id: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None

    @field_validator("department_id", "date_from", "date_to", mode="before")
    @classmethod
    def _blank_as_missing(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class EmployeeAttendanceStat(BaseModel):
    """Per-employee attendance totals for one report run."""

    employee_name: str
    department_name: str
    total_days: int = 0
    present_days: int = 0
    late_days: int = 0

    model_config = {"frozen": True}

    @property
    def absent_days(self) -> int:
        return self.total_days - self.present_days

    @property
    def attendance_rate_percent(self) -> float:
        if self.total_days == 0:
            return 0.0
        return round(self.present_days / self.total_days * 100, 1)

    @property
    def attendance_rate_label(self) -> str:
        """One-decimal rendering, or ``"0"`` when no days were recorded."""
        if self.total_days == 0:
            return "0"
        return f"{self.present_days / self.total_days * 100:.1f}"


class DelimitedTable(BaseModel):
    """Ordered header + rows destined for CSV export."""

    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...] = ()

    model_config = {"frozen": True}

    def to_csv(self) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(self.header)
        writer.writerows(self.rows)
        return buffer.getvalue()


class ReportExport(BaseModel):
    """A rendered report ready to hand to the transport layer."""

    report_type: ReportType
    filename: str
    content: str
    content_type: str = "text/csv"
    row_count: int = 0
    generated_on: date = Field(default_factory=date.today)

    @property
    def content_disposition(self) -> str:
        return f'attachment; filename="{self.filename}"'
