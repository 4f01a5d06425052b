"""Tests for role-tier helpers and employee-data scoping."""

from __future__ import annotations

import pytest

from hrcore.models.principal import Principal, Role
from hrcore.policy.access import (
    can_access_employee_data,
    require_admin,
    require_hr,
    require_manager,
    require_role,
    role_tiers,
)


def test_require_role():
    assert require_role(Role.HR, [Role.ADMIN, Role.HR])
    assert not require_role(Role.EMPLOYEE, [Role.ADMIN, Role.HR])


@pytest.mark.parametrize(
    ("role", "admin", "hr", "manager"),
    [
        (Role.ADMIN, True, True, True),
        (Role.HR, False, True, True),
        (Role.MANAGER, False, False, True),
        (Role.EMPLOYEE, False, False, False),
    ],
)
def test_role_tiers(role, admin, hr, manager):
    assert require_admin(role) is admin
    assert require_hr(role) is hr
    assert require_manager(role) is manager
    assert role_tiers(role) == {"admin": admin, "hr": hr, "manager": manager}


class TestCanAccessEmployeeData:
    @pytest.mark.parametrize("role", [Role.ADMIN, Role.HR, Role.MANAGER])
    def test_privileged_roles_see_anyone(self, role):
        principal = Principal(id="u1", email="a@example.com", role=role)
        assert can_access_employee_data(principal, "emp-42")

    def test_employee_sees_own_data(self):
        principal = Principal(id="u2", email="b@example.com", role=Role.EMPLOYEE, employee_id="emp-7")
        assert can_access_employee_data(principal, "emp-7")
        assert not can_access_employee_data(principal, "emp-8")

    def test_employee_without_profile_sees_nothing(self):
        principal = Principal(id="u3", email="c@example.com", role=Role.EMPLOYEE)
        assert not can_access_employee_data(principal, None)
