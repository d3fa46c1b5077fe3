"""Employee variants and the factory that builds them from persisted fields."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import ClassVar, Union

from .roles import Role

FULL_TIME = "full-time"
PART_TIME = "part-time"

MONTHS_PER_YEAR = 12
DEFAULT_HOURS_PER_MONTH = 80


class UnknownEmployeeKind(ValueError):
    """Raised when an employee is requested for an unsupported kind tag."""

    def __init__(self, kind: object) -> None:
        super().__init__(f"Unknown employee type: {kind}")
        self.kind = kind


@dataclass(frozen=True, slots=True)
class BaseEmployee:
    id: int
    first_name: str
    last_name: str
    email: str
    role: Role
    start_date: date | datetime

    kind: ClassVar[str]

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def employment_kind(self) -> str:
        return self.kind


@dataclass(frozen=True, slots=True)
class FullTimeEmployee(BaseEmployee):
    """Salaried employee paid a fixed share of ``annual_salary`` each month."""

    annual_salary: Decimal = Decimal("0")

    kind: ClassVar[str] = FULL_TIME

    def monthly_base_salary(self) -> Decimal:
        return self.annual_salary / MONTHS_PER_YEAR

    def benefits_eligible(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class PartTimeEmployee(BaseEmployee):
    """Hourly employee.

    ``default_hours_per_month`` only feeds the monthly salary estimate; payslips
    are priced against the hours actually worked.
    """

    hourly_rate: Decimal = Decimal("0")
    default_hours_per_month: int = DEFAULT_HOURS_PER_MONTH

    kind: ClassVar[str] = PART_TIME

    def monthly_base_salary(self) -> Decimal:
        return self.hourly_rate * self.default_hours_per_month

    def benefits_eligible(self) -> bool:
        return False

    def pay_for_hours(self, hours: Decimal | int | float | str) -> Decimal:
        return self.hourly_rate * Decimal(str(hours))


Employee = Union[FullTimeEmployee, PartTimeEmployee]


def create_employee(
    kind: str,
    id: int,
    first_name: str,
    last_name: str,
    email: str,
    role: Role,
    start_date: date | datetime,
    compensation: Decimal | int | float | str,
    *,
    default_hours_per_month: int = DEFAULT_HOURS_PER_MONTH,
) -> Employee:
    """Build the employee variant matching ``kind``.

    ``compensation`` is the annual salary for full-time staff and the hourly
    rate for part-time staff.
    """

    amount = Decimal(str(compensation))
    match kind:
        case "full-time":
            return FullTimeEmployee(
                id=id,
                first_name=first_name,
                last_name=last_name,
                email=email,
                role=role,
                start_date=start_date,
                annual_salary=amount,
            )
        case "part-time":
            return PartTimeEmployee(
                id=id,
                first_name=first_name,
                last_name=last_name,
                email=email,
                role=role,
                start_date=start_date,
                hourly_rate=amount,
                default_hours_per_month=default_hours_per_month,
            )
        case _:
            raise UnknownEmployeeKind(kind)
