from __future__ import annotations

from pathlib import Path
from typing import Iterable

from hrdesk.core.csvio import write_records

COLUMNS = [
    "payslip_id",
    "employee_id",
    "employee",
    "type",
    "pay_period_from",
    "pay_period_to",
    "hours_worked",
    "overtime_hours",
    "base_pay",
    "overtime_pay",
    "gross_pay",
    "deductions",
    "net_pay",
    "status",
]


def export_payslip_register(path: Path, payslips: Iterable[dict]) -> Path:
    records = []
    for payslip in payslips:
        employee = payslip.get("employee") or {}
        row = {column: payslip.get(column) for column in COLUMNS}
        row["payslip_id"] = payslip["id"]
        row["employee"] = f"{employee.get('first_name', '')} {employee.get('last_name', '')}".strip()
        row["type"] = employee.get("type")
        records.append(row)
    return write_records(path, records, COLUMNS)
