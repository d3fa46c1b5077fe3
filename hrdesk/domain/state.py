"""Storage-side state for the HR directory."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class HRState:
    """Persisted rows keyed by id, plus the id sequences for each table."""

    roles: dict[int, dict[str, Any]] = field(default_factory=dict)
    employees: dict[int, dict[str, Any]] = field(default_factory=dict)
    payslips: dict[int, dict[str, Any]] = field(default_factory=dict)
    next_role_id: int = 1
    next_employee_id: int = 1
    next_payslip_id: int = 1
