"""CSV report export endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from hrcore.api.dependencies import (
    ensure_capability,
    get_aggregator,
    get_catalog,
    get_principal,
    get_record_source,
    get_settings,
)
from hrcore.api.errors import ApiError
from hrcore.core.config import AppSettings
from hrcore.core.protocols import IRecordSource
from hrcore.models.principal import Principal
from hrcore.models.reports import ReportRequest, ReportType
from hrcore.policy.catalog import PermissionCatalog
from hrcore.reports.aggregator import ReportAggregator, parse_report_type

logger = logging.getLogger(__name__)

router = APIRouter(tags=["reports"])


@router.post("/reports/csv")
def export_report_csv(
    payload: ReportRequest,
    principal: Principal = Depends(get_principal),
    catalog: PermissionCatalog = Depends(get_catalog),
    settings: AppSettings = Depends(get_settings),
    aggregator: ReportAggregator = Depends(get_aggregator),
    source: IRecordSource = Depends(get_record_source),
) -> Response:
    """Build the requested report and return it as a CSV attachment."""
    ensure_capability(principal, catalog, settings.reports.required_capability)

    if payload.report_type is None or not payload.report_type.strip():
        raise ApiError(status_code=400, code="REPORT_TYPE_REQUIRED", message="Report type is required")
    kind = parse_report_type(payload.report_type)

    dept, start, end = payload.department_id, payload.date_from, payload.date_to
    leave_requests = []
    if kind is ReportType.ATTENDANCE:
        records = source.attendance_records(dept, start, end)
    elif kind is ReportType.PAYROLL:
        records = source.payslip_records(dept, start, end)
    else:
        records = source.leave_balances(dept)
        leave_requests = source.leave_requests(start, end)

    export = aggregator.export(kind, records, dept, start, end, leave_requests=leave_requests)
    logger.info(
        "Report exported",
        extra={
            "report_type": kind.value,
            "principal_id": principal.id,
            "row_count": export.row_count,
        },
    )
    return Response(
        content=export.content,
        media_type=export.content_type,
        headers={"Content-Disposition": export.content_disposition},
    )
