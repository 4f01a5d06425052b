"""Report aggregation pipeline."""

from __future__ import annotations

from hrcore.core.config import ReportConfig
from hrcore.reports.aggregator import ReportAggregator


def create_aggregator(config: ReportConfig | None = None) -> ReportAggregator:
    """Create a ReportAggregator from report settings."""
    if config is None:
        config = ReportConfig()
    return ReportAggregator.from_config(config)
