from __future__ import annotations

from pathlib import Path
from typing import Iterable

from hrdesk.core.csvio import write_records

COLUMNS = ["employee", "email", "amount", "period_from", "period_to"]


def export_bank_payroll(path: Path, payslips: Iterable[dict]) -> Path:
    records = []
    for payslip in payslips:
        employee = payslip.get("employee") or {}
        records.append({
            "employee": f"{employee.get('first_name', '')} {employee.get('last_name', '')}".strip(),
            "email": employee.get("email"),
            "amount": payslip["net_pay"],
            "period_from": payslip["pay_period_from"],
            "period_to": payslip["pay_period_to"],
        })
    return write_records(path, records, COLUMNS)
