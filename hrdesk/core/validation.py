from __future__ import annotations

from decimal import Decimal

from hrdesk.domain import Role


class ValidationError(Exception):
    """Raised when domain validation fails."""


class SalaryOutOfRangeError(ValidationError):
    """Raised when a salary falls outside the band of the target role."""

    def __init__(self, min_salary: Decimal, max_salary: Decimal) -> None:
        super().__init__(f"Salary must be between {min_salary} and {max_salary} for this role")
        self.min_salary = min_salary
        self.max_salary = max_salary


def ensure_salary_in_band(role: Role, salary: Decimal | int | float | str) -> None:
    if not role.is_salary_in_range(salary):
        raise SalaryOutOfRangeError(role.min_salary, role.max_salary)
