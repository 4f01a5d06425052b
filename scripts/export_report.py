"""Export an HR report to CSV from JSON record dumps.

Usage:
    python scripts/export_report.py --type attendance --records attendance.json
    python scripts/export_report.py --type leave --records balances.json \
        --leave-requests requests.json --department D1 --output leave.csv
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from pathlib import Path
from typing import Any, Optional

from pydantic import TypeAdapter

from hrcore.models.records import (
    AttendanceRecord,
    LeaveBalanceRecord,
    LeaveRequestRecord,
    PayslipRecord,
)
from hrcore.models.reports import ReportType
from hrcore.reports.aggregator import ReportAggregator

RECORD_MODELS: dict[ReportType, type] = {
    ReportType.ATTENDANCE: AttendanceRecord,
    ReportType.PAYROLL: PayslipRecord,
    ReportType.LEAVE: LeaveBalanceRecord,
}


def load_records(path: Path, model: type) -> list[Any]:
    """Parse a JSON array of records into ``model`` instances."""
    data = json.loads(path.read_text(encoding="utf-8"))
    return TypeAdapter(list[model]).validate_python(data)


def export_report(
    report_type: ReportType,
    records_path: Path,
    *,
    leave_requests_path: Optional[Path] = None,
    department_id: Optional[str] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    aggregator: Optional[ReportAggregator] = None,
) -> str:
    """Build a report from JSON files and return its CSV text."""
    aggregator = aggregator or ReportAggregator()
    records = load_records(records_path, RECORD_MODELS[report_type])
    requests: list[LeaveRequestRecord] = []
    if report_type is ReportType.LEAVE and leave_requests_path is not None:
        requests = load_records(leave_requests_path, LeaveRequestRecord)
    table = aggregator.build(
        report_type, records, department_id, date_from, date_to, leave_requests=requests,
    )
    return table.to_csv()


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Export an HR report as CSV")
    parser.add_argument("--type", required=True, choices=[t.value for t in ReportType], help="Report type")
    parser.add_argument("--records", required=True, type=Path, help="JSON array of input records")
    parser.add_argument("--leave-requests", type=Path, default=None, help="JSON array of leave requests (leave only)")
    parser.add_argument("--department", default=None, help="Department id filter ('all' for none)")
    parser.add_argument("--from", dest="date_from", type=date.fromisoformat, default=None, help="Start date (YYYY-MM-DD)")
    parser.add_argument("--to", dest="date_to", type=date.fromisoformat, default=None, help="End date (YYYY-MM-DD)")
    parser.add_argument("--output", type=Path, default=None, help="Output file (default: stdout)")
    args = parser.parse_args(argv)

    csv_text = export_report(
        ReportType(args.type),
        args.records,
        leave_requests_path=args.leave_requests,
        department_id=args.department,
        date_from=args.date_from,
        date_to=args.date_to,
    )

    if args.output is None:
        sys.stdout.write(csv_text)
        return
    args.output.write_text(csv_text, encoding="utf-8", newline="")
    print(f"Wrote {args.output}", file=sys.stderr)


if __name__ == "__main__":
    main()
