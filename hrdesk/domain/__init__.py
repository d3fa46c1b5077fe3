"""Domain layer definitions."""

from .employees import (
    FULL_TIME,
    PART_TIME,
    Employee,
    FullTimeEmployee,
    PartTimeEmployee,
    UnknownEmployeeKind,
    create_employee,
)
from .payslips import (
    DEFAULT_PAY_POLICY,
    FullTimePayslipCalculator,
    PartTimePayslipCalculator,
    PayPolicy,
    PayslipCalculator,
    PayslipResult,
    UnknownEmployeeType,
    create_calculator,
)
from .roles import Role
from .state import HRState

__all__ = [
    "DEFAULT_PAY_POLICY",
    "FULL_TIME",
    "PART_TIME",
    "Employee",
    "FullTimeEmployee",
    "FullTimePayslipCalculator",
    "HRState",
    "PartTimeEmployee",
    "PartTimePayslipCalculator",
    "PayPolicy",
    "PayslipCalculator",
    "PayslipResult",
    "Role",
    "UnknownEmployeeKind",
    "UnknownEmployeeType",
    "create_calculator",
    "create_employee",
]
