"""Payroll report: one row per payslip, input order preserved."""

from __future__ import annotations

from collections.abc import Iterable

from hrcore.models.records import PayslipRecord
from hrcore.models.reports import DelimitedTable

PAYROLL_HEADER: tuple[str, ...] = (
    "Employee Name",
    "Department",
    "Period",
    "Base Salary",
    "Overtime",
    "Deductions",
    "Net Salary",
    "Status",
)


def payslip_row(payslip: PayslipRecord) -> tuple[str, ...]:
    return (
        payslip.employee_name,
        payslip.department_name,
        f"{payslip.period_start.isoformat()} to {payslip.period_end.isoformat()}",
        str(payslip.base_salary),
        str(payslip.overtime_pay),
        str(payslip.deductions),
        str(payslip.net_salary),
        payslip.status,
    )


def build_payroll_table(records: Iterable[PayslipRecord]) -> DelimitedTable:
    return DelimitedTable(
        header=PAYROLL_HEADER,
        rows=tuple(payslip_row(p) for p in records),
    )
