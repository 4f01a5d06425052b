"""Type aliases used across the HR core."""

from __future__ import annotations

Capability = str
EmployeeId = str
DepartmentId = str
