"""Integration test fixtures: FastAPI app wired to in-memory collaborators."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from hrcore.api.app import create_app
from hrcore.core.config import AppSettings
from hrcore.models.principal import Principal, Role
from hrcore.models.records import (
    AttendanceRecord,
    LeaveBalanceRecord,
    LeaveRequestRecord,
    LeaveStatus,
    PayslipRecord,
)
from tests.fakes import TOKENS, MemoryAuthenticator, MemoryRecordSource


@pytest.fixture
def authenticator():
    auth = MemoryAuthenticator()
    for role, token in TOKENS.items():
        auth.register(
            token,
            Principal(
                id=f"user-{role.value.lower()}",
                email=f"{role.value.lower()}@example.com",
                role=role,
                employee_id=f"emp-{role.value.lower()}",
            ),
        )
    return auth


@pytest.fixture
def record_source():
    return MemoryRecordSource(
        attendance=[
            AttendanceRecord(
                employee_id="E1", employee_name="Ana Smith", department_name="Engineering",
                department_id="D1", date=date(2024, 3, 1),
                clock_in=datetime(2024, 3, 1, 8, 30), clock_out=datetime(2024, 3, 1, 17, 0),
            ),
            AttendanceRecord(
                employee_id="E1", employee_name="Ana Smith", department_name="Engineering",
                department_id="D1", date=date(2024, 3, 2),
                clock_in=datetime(2024, 3, 2, 9, 15), clock_out=datetime(2024, 3, 2, 17, 0),
            ),
            AttendanceRecord(
                employee_id="E1", employee_name="Ana Smith", department_name="Engineering",
                department_id="D1", date=date(2024, 3, 3),
            ),
            AttendanceRecord(
                employee_id="E2", employee_name="Bo Chen", department_name="Sales",
                department_id="D2", date=date(2024, 3, 1),
                clock_in=datetime(2024, 3, 1, 8, 0), clock_out=datetime(2024, 3, 1, 16, 0),
            ),
        ],
        payslips=[
            PayslipRecord(
                employee_id="E1", employee_name="Ana Smith", department_name="Engineering",
                department_id="D1", period_start=date(2024, 2, 1), period_end=date(2024, 2, 29),
                base_salary=Decimal("5000"), overtime_pay=Decimal("0"), deductions=Decimal("250"),
                net_salary=Decimal("4750"), status="POSTED",
            ),
        ],
        balances=[
            LeaveBalanceRecord(
                employee_id="E1", employee_name="Ana Smith", department_name="Engineering",
                department_id="D1", leave_type_id="ANNUAL", leave_type_name="Annual Leave",
                total_days=Decimal("20"), used_days=Decimal("5"), remaining_days=Decimal("15"),
            ),
        ],
        requests=[
            LeaveRequestRecord(
                employee_id="E1", leave_type_id="ANNUAL", status=LeaveStatus.PENDING,
                start_date=date(2024, 6, 3), end_date=date(2024, 6, 5),
            ),
            LeaveRequestRecord(
                employee_id="E1", leave_type_id="ANNUAL", status=LeaveStatus.PENDING,
                start_date=date(2024, 7, 1), end_date=date(2024, 7, 2),
            ),
            LeaveRequestRecord(
                employee_id="E1", leave_type_id="ANNUAL", status=LeaveStatus.APPROVED,
                start_date=date(2024, 4, 1), end_date=date(2024, 4, 2),
            ),
        ],
    )


@pytest.fixture
def client(authenticator, record_source):
    app = create_app(
        AppSettings(log_format="text", log_level="WARNING"),
        authenticator=authenticator,
        record_source=record_source,
    )
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client
