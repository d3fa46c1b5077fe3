"""Application service layer for the HR directory and payroll."""
from __future__ import annotations

import logging
from decimal import Decimal
from pathlib import Path

from hrdesk.core.pay_policy import load_sample_roles
from hrdesk.core.payroll import calculate_payslip, role_from_record, summarise_headcount, to_result_model
from hrdesk.core.reports import report_path
from hrdesk.core.schema import (
    EmployeeCreate,
    EmployeeUpdate,
    PayslipCalculationRequest,
    PayslipCreate,
    PayslipResultModel,
    RoleCreate,
    RoleUpdate,
    StatsModel,
)
from hrdesk.core.validation import ValidationError, ensure_salary_in_band
from hrdesk.domain import DEFAULT_PAY_POLICY, PayPolicy, Role
from hrdesk.exporters.bank_payroll_csv import export_bank_payroll
from hrdesk.exporters.payslip_register import export_payslip_register
from hrdesk.infrastructure import HRRepository

logger = logging.getLogger(__name__)


def _role_record(role: Role) -> dict:
    return {
        "title": role.title,
        "description": role.description,
        "department": role.department,
        "level": role.level,
        "min_salary": role.min_salary,
        "max_salary": role.max_salary,
        "responsibilities": role.responsibilities,
    }


class HRService:
    """Coordinates role, employee and payslip use cases."""

    REPORT_FORMATS = {"csv", "xlsx"}

    def __init__(
        self,
        repository: HRRepository,
        *,
        policy: PayPolicy = DEFAULT_PAY_POLICY,
        validate_salary_on_update: bool = False,
    ) -> None:
        self._repository = repository
        self._policy = policy
        self._validate_salary_on_update = validate_salary_on_update

    @property
    def policy(self) -> PayPolicy:
        return self._policy

    # ------------------------------------------------------------------
    # roles
    # ------------------------------------------------------------------
    def list_roles(self) -> list[dict]:
        return self._repository.list_roles()

    def get_role(self, role_id: int) -> dict | None:
        return self._repository.get_role(role_id)

    def create_role(self, payload: RoleCreate) -> dict:
        role = self._repository.create_role(payload.model_dump())
        logger.info("created role %s (%s)", role["id"], role["title"])
        return role

    def update_role(self, role_id: int, payload: RoleUpdate) -> dict | None:
        existing = self._repository.get_role(role_id)
        if existing is None:
            return None
        changes = payload.model_dump(exclude_unset=True)
        try:
            role = role_from_record({**existing, **changes})
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc
        return self._repository.update_role(role_id, _role_record(role))

    def delete_role(self, role_id: int) -> bool:
        deleted = self._repository.delete_role(role_id)
        if deleted:
            logger.info("deleted role %s", role_id)
        return deleted

    def add_responsibility(self, role_id: int, responsibility: str) -> dict | None:
        existing = self._repository.get_role(role_id)
        if existing is None:
            return None
        role = role_from_record(existing)
        role.add_responsibility(responsibility)
        return self._repository.update_role(role_id, {"responsibilities": role.responsibilities})

    def remove_responsibility(self, role_id: int, responsibility: str) -> dict | None:
        existing = self._repository.get_role(role_id)
        if existing is None:
            return None
        role = role_from_record(existing)
        role.remove_responsibility(responsibility)
        return self._repository.update_role(role_id, {"responsibilities": role.responsibilities})

    def seed_sample_roles(self) -> int:
        seeded = 0
        for raw in load_sample_roles():
            self.create_role(RoleCreate(**raw))
            seeded += 1
        return seeded

    # ------------------------------------------------------------------
    # employees
    # ------------------------------------------------------------------
    def list_employees(self) -> list[dict]:
        return self._repository.list_employees()

    def get_employee(self, employee_id: int) -> dict | None:
        return self._repository.get_employee(employee_id)

    def _check_email_available(self, email: str, *, employee_id: int | None = None) -> None:
        existing = self._repository.get_employee_by_email(email)
        if existing and existing["id"] != employee_id:
            logger.warning("rejected duplicate employee email %s", email)
            raise ValidationError("Employee with this email already exists")

    def _check_salary(self, role_id: int, salary: Decimal) -> None:
        role_row = self._repository.get_role(role_id)
        if role_row is None:
            raise ValidationError("Invalid role ID")
        try:
            ensure_salary_in_band(role_from_record(role_row), salary)
        except ValidationError as exc:
            logger.warning("rejected salary %s for role %s: %s", salary, role_id, exc)
            raise

    def create_employee(self, payload: EmployeeCreate) -> dict:
        self._check_email_available(payload.email)
        self._check_salary(payload.role_id, payload.salary)
        employee = self._repository.create_employee(payload.model_dump())
        logger.info("created %s employee %s", employee["type"], employee["id"])
        return employee

    def update_employee(self, employee_id: int, payload: EmployeeUpdate) -> dict | None:
        existing = self._repository.get_employee_record(employee_id)
        if existing is None:
            return None
        changes = payload.model_dump(exclude_unset=True)
        if changes.get("email"):
            self._check_email_available(changes["email"], employee_id=employee_id)
        if self._validate_salary_on_update and ({"salary", "role_id"} & changes.keys()):
            self._check_salary(
                changes.get("role_id", existing["role_id"]),
                changes.get("salary", existing["salary"]),
            )
        return self._repository.update_employee(employee_id, changes)

    def delete_employee(self, employee_id: int) -> bool:
        deleted = self._repository.delete_employee(employee_id)
        if deleted:
            logger.info("deleted employee %s", employee_id)
        return deleted

    # ------------------------------------------------------------------
    # payslips
    # ------------------------------------------------------------------
    def calculate_payslip(self, request: PayslipCalculationRequest) -> PayslipResultModel | None:
        employee = self._repository.get_employee(request.employee_id)
        if employee is None:
            return None
        result = calculate_payslip(
            employee,
            request.hours_worked,
            request.overtime_hours,
            request.deductions,
            self._policy,
        )
        return to_result_model(result)

    def list_payslips(self) -> list[dict]:
        return self._repository.list_payslips()

    def get_payslip(self, payslip_id: int) -> dict | None:
        return self._repository.get_payslip(payslip_id)

    def list_payslips_for_employee(self, employee_id: int) -> list[dict]:
        return self._repository.list_payslips_for_employee(employee_id)

    def create_payslip(self, payload: PayslipCreate) -> dict:
        if self._repository.get_employee(payload.employee_id) is None:
            raise ValidationError("Invalid employee ID")
        payslip = self._repository.create_payslip(payload.model_dump())
        logger.info("stored payslip %s for employee %s", payslip["id"], payslip["employee_id"])
        return payslip

    def update_payslip_status(self, payslip_id: int, status: str) -> dict | None:
        return self._repository.update_payslip(payslip_id, {"status": status})

    def delete_payslip(self, payslip_id: int) -> bool:
        return self._repository.delete_payslip(payslip_id)

    # ------------------------------------------------------------------
    # dashboard & reports
    # ------------------------------------------------------------------
    def get_stats(self) -> StatsModel:
        roles = {row["id"]: row for row in self._repository.list_roles()}
        records = self._repository.list_employee_records()
        return StatsModel(**summarise_headcount(records, roles, self._policy))

    def _check_format(self, fmt: str) -> str:
        fmt = fmt.lower()
        if fmt not in self.REPORT_FORMATS:
            raise ValidationError(f"format must be one of {', '.join(sorted(self.REPORT_FORMATS))}")
        return fmt

    def export_payslip_register(self, fmt: str = "csv") -> Path:
        fmt = self._check_format(fmt)
        return export_payslip_register(report_path("payslips", fmt), self.list_payslips())

    def export_bank_transfers(self, fmt: str = "csv") -> Path:
        fmt = self._check_format(fmt)
        return export_bank_payroll(report_path("bank-transfers", fmt), self.list_payslips())
