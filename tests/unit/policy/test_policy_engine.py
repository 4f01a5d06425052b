"""Tests for PolicyEngine route gatekeeping."""

from __future__ import annotations

import itertools
from concurrent.futures import ThreadPoolExecutor

import pytest

from hrcore.models.policy import Decision, RouteRule
from hrcore.models.principal import Principal, Role
from hrcore.policy.engine import DEFAULT_ROUTE_RULES, PolicyEngine


def _principal(role: Role) -> Principal:
    return Principal(id=f"user-{role.value.lower()}", email=f"{role.value.lower()}@example.com", role=role)


@pytest.fixture
def engine():
    return PolicyEngine()


class TestPublicPaths:
    @pytest.mark.parametrize("path", ["/login", "/login/callback", "/register", "/"])
    def test_public_paths_allow_anyone(self, engine, path):
        assert engine.authorize(None, path) == Decision.ALLOW
        for role in Role:
            assert engine.authorize(_principal(role), path) == Decision.ALLOW

    def test_root_is_exact_match_only(self, engine):
        assert engine.is_public("/")
        assert not engine.is_public("/dashboard")

    def test_public_match_is_case_sensitive(self, engine):
        assert not engine.is_public("/LOGIN")


class TestUnauthenticated:
    @pytest.mark.parametrize("path", ["/admin", "/reports", "/dashboard", "/self/profile"])
    def test_missing_principal_denied(self, engine, path):
        assert engine.authorize(None, path) == Decision.DENY_UNAUTHENTICATED


class TestRouteRules:
    @pytest.mark.parametrize(
        ("path", "allowed"),
        [
            ("/admin/users", {Role.ADMIN}),
            ("/people/employees", {Role.ADMIN, Role.HR}),
            ("/leave/requests", {Role.ADMIN, Role.HR}),
            ("/attendance/clock", {Role.ADMIN, Role.HR}),
            ("/reports", {Role.ADMIN, Role.HR, Role.MANAGER}),
        ],
    )
    def test_matching_rules_are_conjunctive(self, engine, path, allowed):
        for role in Role:
            expected = Decision.ALLOW if role in allowed else Decision.DENY_FORBIDDEN
            assert engine.authorize(_principal(role), path) == expected, role

    def test_employee_blocked_by_narrower_rule_despite_broader_grant(self, engine):
        # /attendance matches the all-roles rule and the ADMIN/HR rule.
        assert len(engine.matching_rules("/attendance")) == 3
        assert engine.authorize(_principal(Role.EMPLOYEE), "/attendance") == Decision.DENY_FORBIDDEN

    @pytest.mark.parametrize("path", ["/dashboard", "/self/payslips", "/payroll/runs", "/unauthorized"])
    def test_unmatched_paths_default_allow(self, engine, path):
        assert engine.matching_rules(path) == []
        for role in Role:
            assert engine.authorize(_principal(role), path) == Decision.ALLOW

    def test_prefix_match_is_case_sensitive(self, engine):
        assert engine.authorize(_principal(Role.EMPLOYEE), "/Admin") == Decision.ALLOW


class TestRuleOrder:
    def test_decision_independent_of_rule_order(self):
        paths = ["/admin", "/people", "/leave", "/attendance", "/reports", "/dashboard"]
        baseline = PolicyEngine()
        for order in itertools.permutations(DEFAULT_ROUTE_RULES):
            shuffled = PolicyEngine(order)
            for path in paths:
                for role in Role:
                    p = _principal(role)
                    assert shuffled.authorize(p, path) == baseline.authorize(p, path)

    def test_custom_rules_and_whitelist(self):
        engine = PolicyEngine(
            [RouteRule(path_prefixes=("/finance",), allowed_roles=frozenset({Role.HR}))],
            public_prefixes=("/public",),
            public_exact_paths=(),
        )
        assert engine.authorize(None, "/public/docs") == Decision.ALLOW
        assert engine.authorize(None, "/") == Decision.DENY_UNAUTHENTICATED
        assert engine.authorize(_principal(Role.ADMIN), "/finance") == Decision.DENY_FORBIDDEN


def test_concurrent_authorize_is_consistent(engine):
    principal = _principal(Role.MANAGER)
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: engine.authorize(principal, "/people"), range(200)))
    assert set(results) == {Decision.DENY_FORBIDDEN}
