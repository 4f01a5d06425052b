"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class PolicyConfig(BaseSettings):
    """Route gatekeeping configuration."""

    model_config = {"env_prefix": "HRCORE_POLICY_"}

    login_path: str = "/login"
    unauthorized_path: str = "/unauthorized"
    # Paths the gate middleware never evaluates (API routes guard themselves)
    gate_excluded_prefixes: list[str] = [
        "/api",
        "/health",
        "/ready",
        "/docs",
        "/openapi.json",
        "/static",
    ]


class ReportConfig(BaseSettings):
    """Report aggregation configuration."""

    model_config = {"env_prefix": "HRCORE_REPORTS_"}

    late_threshold_hour: int = 9
    timezone: str | None = None  # IANA name applied to tz-aware clock-ins
    all_departments_value: str = "all"
    required_capability: str = "reports.read"


class ApiConfig(BaseSettings):
    """HTTP transport configuration."""

    model_config = {"env_prefix": "HRCORE_API_"}

    title: str = "HR Core Access & Reporting"
    session_cookie: str = "session"


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "HRCORE_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    policy: PolicyConfig = PolicyConfig()
    reports: ReportConfig = ReportConfig()
    api: ApiConfig = ApiConfig()
