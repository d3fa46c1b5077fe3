"""Payslip calculation for the supported employee variants."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from .employees import DEFAULT_HOURS_PER_MONTH, Employee, FullTimeEmployee, PartTimeEmployee

ZERO = Decimal("0")


class UnknownEmployeeType(TypeError):
    """Raised when no calculator exists for the given employee."""


@dataclass(frozen=True, slots=True)
class PayPolicy:
    overtime_multiplier: Decimal = Decimal("1.5")
    weeks_per_year: int = 52
    hours_per_week: int = 40
    part_time_hours_per_month: int = DEFAULT_HOURS_PER_MONTH

    @property
    def annual_hours(self) -> int:
        return self.weeks_per_year * self.hours_per_week


DEFAULT_PAY_POLICY = PayPolicy()


@dataclass(frozen=True, slots=True)
class PayslipResult:
    base_pay: Decimal
    overtime_pay: Decimal
    gross_pay: Decimal
    deductions: Decimal
    net_pay: Decimal
    hours_worked: Decimal
    overtime_hours: Decimal


def _to_decimal(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class PayslipCalculator(ABC):
    """Shared payslip algorithm; subclasses price base and overtime pay."""

    def __init__(self, employee: Employee, policy: PayPolicy = DEFAULT_PAY_POLICY) -> None:
        self.employee = employee
        self.policy = policy

    def calculate(
        self,
        hours_worked: Decimal | int | float | str,
        overtime_hours: Decimal | int | float | str = 0,
        deductions: Decimal | int | float | str = 0,
    ) -> PayslipResult:
        hours = _to_decimal(hours_worked)
        overtime = _to_decimal(overtime_hours)
        deducted = _to_decimal(deductions)

        base_pay = self.base_pay(hours)
        overtime_pay = self.overtime_pay(overtime)
        gross_pay = base_pay + overtime_pay
        net_pay = gross_pay - deducted

        return PayslipResult(
            base_pay=base_pay,
            overtime_pay=overtime_pay,
            gross_pay=gross_pay,
            deductions=deducted,
            net_pay=net_pay,
            hours_worked=hours,
            overtime_hours=overtime,
        )

    @abstractmethod
    def base_pay(self, hours_worked: Decimal) -> Decimal: ...

    @abstractmethod
    def overtime_pay(self, overtime_hours: Decimal) -> Decimal: ...


class FullTimePayslipCalculator(PayslipCalculator):
    employee: FullTimeEmployee

    def base_pay(self, hours_worked: Decimal) -> Decimal:
        # salaried staff receive the same amount whatever hours were logged
        return self.employee.monthly_base_salary()

    def hourly_equivalent(self) -> Decimal:
        return self.employee.annual_salary / self.policy.annual_hours

    def overtime_pay(self, overtime_hours: Decimal) -> Decimal:
        if overtime_hours <= 0:
            return ZERO
        return overtime_hours * self.hourly_equivalent() * self.policy.overtime_multiplier


class PartTimePayslipCalculator(PayslipCalculator):
    employee: PartTimeEmployee

    def base_pay(self, hours_worked: Decimal) -> Decimal:
        return self.employee.pay_for_hours(hours_worked)

    def overtime_pay(self, overtime_hours: Decimal) -> Decimal:
        if overtime_hours <= 0:
            return ZERO
        return overtime_hours * self.employee.hourly_rate * self.policy.overtime_multiplier


def create_calculator(employee: Employee, policy: PayPolicy | None = None) -> PayslipCalculator:
    """Select the calculator for the employee's kind tag."""

    policy = policy or DEFAULT_PAY_POLICY
    match getattr(employee, "kind", None):
        case "full-time":
            return FullTimePayslipCalculator(employee, policy)
        case "part-time":
            return PartTimePayslipCalculator(employee, policy)
        case _:
            raise UnknownEmployeeType(f"Unknown employee type: {type(employee).__name__}")
