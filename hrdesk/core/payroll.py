"""Bridges persisted rows and the payslip calculation domain."""
from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from hrdesk.core.schema import PayslipResultModel
from hrdesk.domain import (
    DEFAULT_PAY_POLICY,
    FULL_TIME,
    PART_TIME,
    Employee,
    PayPolicy,
    PayslipResult,
    Role,
    UnknownEmployeeKind,
    create_calculator,
    create_employee,
)

logger = logging.getLogger(__name__)


def _quantize(value: Decimal) -> Decimal:
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def role_from_record(record: dict) -> Role:
    return Role(
        id=record["id"],
        title=record["title"],
        description=record.get("description", ""),
        department=record["department"],
        level=record["level"],
        min_salary=record["min_salary"],
        max_salary=record["max_salary"],
        responsibilities=record.get("responsibilities") or [],
    )


def employee_from_record(record: dict, role: Role, policy: PayPolicy = DEFAULT_PAY_POLICY) -> Employee:
    return create_employee(
        record["type"],
        record["id"],
        record["first_name"],
        record["last_name"],
        record["email"],
        role,
        record["start_date"],
        record["salary"],
        default_hours_per_month=policy.part_time_hours_per_month,
    )


def to_result_model(result: PayslipResult) -> PayslipResultModel:
    """Round a raw calculation to cents for presentation."""

    return PayslipResultModel(
        base_pay=_quantize(result.base_pay),
        overtime_pay=_quantize(result.overtime_pay),
        gross_pay=_quantize(result.gross_pay),
        deductions=_quantize(result.deductions),
        net_pay=_quantize(result.net_pay),
        hours_worked=result.hours_worked,
        overtime_hours=result.overtime_hours,
    )


def calculate_payslip(
    employee_with_role: dict,
    hours_worked: Decimal,
    overtime_hours: Decimal = Decimal("0"),
    deductions: Decimal = Decimal("0"),
    policy: PayPolicy = DEFAULT_PAY_POLICY,
) -> PayslipResult:
    """Rebuild the employee from its stored row and run the matching calculator."""

    role = role_from_record(employee_with_role["role"])
    employee = employee_from_record(employee_with_role, role, policy)
    calculator = create_calculator(employee, policy)
    return calculator.calculate(hours_worked, overtime_hours, deductions)


def _unassigned_role(role_id: int) -> Role:
    return Role(
        id=role_id,
        title="Unassigned",
        description="",
        department="unassigned",
        level=1,
        min_salary=0,
        max_salary=0,
    )


def summarise_headcount(
    employee_records: Iterable[dict],
    roles: dict[int, dict],
    policy: PayPolicy = DEFAULT_PAY_POLICY,
) -> dict[str, int]:
    """Count active employees by kind and estimate the monthly payroll.

    Employees whose role was deleted still count; the estimate only needs
    their compensation.
    """

    total = 0
    full_time = 0
    part_time = 0
    payroll = Decimal("0")
    for record in employee_records:
        if record.get("status") != "active":
            continue
        try:
            role_row = roles.get(record.get("role_id"))
            role = role_from_record(role_row) if role_row else _unassigned_role(record.get("role_id"))
            employee = employee_from_record(record, role, policy)
        except UnknownEmployeeKind:
            logger.warning("skipping employee %s with unknown type %r", record.get("id"), record.get("type"))
            continue
        total += 1
        if employee.kind == FULL_TIME:
            full_time += 1
        elif employee.kind == PART_TIME:
            part_time += 1
        payroll += employee.monthly_base_salary()

    return {
        "total_employees": total,
        "full_time_employees": full_time,
        "part_time_employees": part_time,
        "monthly_payroll": int(payroll.quantize(Decimal("1"), rounding=ROUND_HALF_UP)),
    }
