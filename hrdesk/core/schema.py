from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, constr, field_validator, model_validator

EmploymentType = Literal["full-time", "part-time"]
Email = constr(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _unique(items: list[str]) -> list[str]:
    unique: list[str] = []
    for item in items:
        if item not in unique:
            unique.append(item)
    return unique


def _reject_explicit_nulls(model: BaseModel, nullable: frozenset[str] = frozenset()) -> None:
    for name in model.model_fields_set - nullable:
        if getattr(model, name) is None:
            raise ValueError(f"{name} may not be null")


class RoleCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str
    department: str = Field(min_length=1)
    level: int = Field(ge=1)
    min_salary: Decimal = Field(ge=0)
    max_salary: Decimal = Field(ge=0)
    responsibilities: list[str] = Field(default_factory=list)

    @field_validator("responsibilities")
    @classmethod
    def _dedupe_responsibilities(cls, value: list[str]) -> list[str]:
        return _unique(value)

    @model_validator(mode="after")
    def _check_band(self) -> "RoleCreate":
        if self.min_salary > self.max_salary:
            raise ValueError("min_salary cannot exceed max_salary")
        return self


class RoleUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    department: str | None = Field(default=None, min_length=1)
    level: int | None = Field(default=None, ge=1)
    min_salary: Decimal | None = Field(default=None, ge=0)
    max_salary: Decimal | None = Field(default=None, ge=0)
    responsibilities: list[str] | None = None

    @field_validator("responsibilities")
    @classmethod
    def _dedupe_responsibilities(cls, value: list[str] | None) -> list[str] | None:
        return _unique(value) if value is not None else None

    @model_validator(mode="after")
    def _no_nulls(self) -> "RoleUpdate":
        _reject_explicit_nulls(self)
        return self


class ResponsibilityChange(BaseModel):
    responsibility: str = Field(min_length=1)


class EmployeeCreate(BaseModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: Email
    phone: str | None = None
    type: EmploymentType
    department: str = Field(min_length=1)
    role_id: int
    salary: Decimal = Field(ge=0)
    start_date: date
    status: str = "active"


class EmployeeUpdate(BaseModel):
    first_name: str | None = Field(default=None, min_length=1)
    last_name: str | None = Field(default=None, min_length=1)
    email: Email | None = None
    phone: str | None = None
    type: EmploymentType | None = None
    department: str | None = Field(default=None, min_length=1)
    role_id: int | None = None
    salary: Decimal | None = Field(default=None, ge=0)
    start_date: date | None = None
    status: str | None = None

    @model_validator(mode="after")
    def _only_phone_nullable(self) -> "EmployeeUpdate":
        _reject_explicit_nulls(self, frozenset({"phone"}))
        return self


class PayslipCalculationRequest(BaseModel):
    employee_id: int
    hours_worked: Decimal = Field(ge=0)
    overtime_hours: Decimal = Field(default=Decimal("0"), ge=0)
    deductions: Decimal = Field(default=Decimal("0"), ge=0)


class PayslipResultModel(BaseModel):
    base_pay: Decimal = Decimal("0")
    overtime_pay: Decimal = Decimal("0")
    gross_pay: Decimal = Decimal("0")
    deductions: Decimal = Decimal("0")
    net_pay: Decimal = Decimal("0")
    hours_worked: Decimal = Decimal("0")
    overtime_hours: Decimal = Decimal("0")


class PayslipCreate(BaseModel):
    employee_id: int
    pay_period_from: datetime
    pay_period_to: datetime
    hours_worked: Decimal = Field(ge=0)
    overtime_hours: Decimal = Field(default=Decimal("0"), ge=0)
    base_pay: Decimal
    overtime_pay: Decimal = Decimal("0")
    deductions: Decimal = Decimal("0")
    gross_pay: Decimal
    net_pay: Decimal
    status: str = "generated"

    @model_validator(mode="after")
    def _check_period(self) -> "PayslipCreate":
        if self.pay_period_from > self.pay_period_to:
            raise ValueError("pay_period_from must not be after pay_period_to")
        return self


class StatsModel(BaseModel):
    total_employees: int = 0
    full_time_employees: int = 0
    part_time_employees: int = 0
    monthly_payroll: int = 0


class PayslipStatusUpdate(BaseModel):
    status: str = Field(min_length=1)
