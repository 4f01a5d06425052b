"""Report input records supplied by the persistence collaborator.

Each record is a read-only view materialized once per report run. Department
filtering compares against ``department_id``; ``department_name`` is what the
report renders.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel


class LeaveStatus(StrEnum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"


class AttendanceRecord(BaseModel):
    """One employee-day of attendance."""

    employee_id: str
    employee_name: str
    department_name: str
    department_id: Optional[str] = None
    date: dt.date
    clock_in: Optional[dt.datetime] = None
    clock_out: Optional[dt.datetime] = None

    model_config = {"frozen": True}

    @property
    def is_present(self) -> bool:
        """Present means both clock events were recorded."""
        return self.clock_in is not None and self.clock_out is not None


class PayslipRecord(BaseModel):
    """One payslip within a payroll run."""

    employee_id: str
    employee_name: str
    department_name: str
    department_id: Optional[str] = None
    period_start: dt.date
    period_end: dt.date
    base_salary: Decimal = Decimal("0")
    overtime_pay: Decimal = Decimal("0")
    deductions: Decimal = Decimal("0")
    net_salary: Decimal = Decimal("0")
    status: str = ""

    model_config = {"frozen": True}


class LeaveBalanceRecord(BaseModel):
    """Entitlement of one employee for one leave type."""

    employee_id: str
    employee_name: str
    department_name: str
    department_id: Optional[str] = None
    leave_type_id: str
    leave_type_name: str
    total_days: Decimal = Decimal("0")
    used_days: Decimal = Decimal("0")
    remaining_days: Decimal = Decimal("0")

    model_config = {"frozen": True}


class LeaveRequestRecord(BaseModel):
    employee_id: str
    leave_type_id: str
    status: LeaveStatus
    start_date: dt.date
    end_date: dt.date

    model_config = {"frozen": True}
