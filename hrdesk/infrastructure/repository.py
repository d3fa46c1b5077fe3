"""Infrastructure layer for HR record persistence."""
from __future__ import annotations

import copy
from datetime import datetime, timezone
from typing import Any, Protocol

from hrdesk.domain import HRState


class HRRepository(Protocol):
    """Persistence contract for roles, employees and payslips."""

    def list_roles(self) -> list[dict]: ...

    def get_role(self, role_id: int) -> dict | None: ...

    def create_role(self, data: dict) -> dict: ...

    def update_role(self, role_id: int, changes: dict) -> dict | None: ...

    def delete_role(self, role_id: int) -> bool: ...

    def list_employees(self) -> list[dict]: ...

    def get_employee(self, employee_id: int) -> dict | None: ...

    def get_employee_record(self, employee_id: int) -> dict | None: ...

    def list_employee_records(self) -> list[dict]: ...

    def get_employee_by_email(self, email: str) -> dict | None: ...

    def create_employee(self, data: dict) -> dict: ...

    def update_employee(self, employee_id: int, changes: dict) -> dict | None: ...

    def delete_employee(self, employee_id: int) -> bool: ...

    def list_payslips(self) -> list[dict]: ...

    def get_payslip(self, payslip_id: int) -> dict | None: ...

    def list_payslips_for_employee(self, employee_id: int) -> list[dict]: ...

    def create_payslip(self, data: dict) -> dict: ...

    def update_payslip(self, payslip_id: int, changes: dict) -> dict | None: ...

    def delete_payslip(self, payslip_id: int) -> bool: ...

    def reset(self) -> None: ...


class InMemoryHRRepository:
    """Simple in-memory repository for fast iteration and tests.

    Rows are copied on the way in and out so callers never share mutable
    state with the store.
    """

    def __init__(self) -> None:
        self._state = HRState()

    @staticmethod
    def _copy(row: dict[str, Any] | None) -> dict[str, Any] | None:
        return copy.deepcopy(row) if row is not None else None

    # ------------------------------------------------------------------
    # roles
    # ------------------------------------------------------------------
    def list_roles(self) -> list[dict]:
        return [copy.deepcopy(row) for row in self._state.roles.values()]

    def get_role(self, role_id: int) -> dict | None:
        return self._copy(self._state.roles.get(role_id))

    def create_role(self, data: dict) -> dict:
        role_id = self._state.next_role_id
        self._state.next_role_id += 1
        row = {**copy.deepcopy(data), "id": role_id}
        self._state.roles[role_id] = row
        return copy.deepcopy(row)

    def update_role(self, role_id: int, changes: dict) -> dict | None:
        existing = self._state.roles.get(role_id)
        if existing is None:
            return None
        existing.update(copy.deepcopy(changes))
        return copy.deepcopy(existing)

    def delete_role(self, role_id: int) -> bool:
        return self._state.roles.pop(role_id, None) is not None

    # ------------------------------------------------------------------
    # employees
    # ------------------------------------------------------------------
    def _with_role(self, employee: dict) -> dict | None:
        role = self._state.roles.get(employee.get("role_id"))
        if role is None:
            return None
        return {**copy.deepcopy(employee), "role": copy.deepcopy(role)}

    def list_employees(self) -> list[dict]:
        rows: list[dict] = []
        for employee in self._state.employees.values():
            row = self._with_role(employee)
            if row is not None:
                rows.append(row)
        return rows

    def get_employee(self, employee_id: int) -> dict | None:
        employee = self._state.employees.get(employee_id)
        if employee is None:
            return None
        return self._with_role(employee)

    def get_employee_record(self, employee_id: int) -> dict | None:
        """Return the stored row without joining its role."""
        return self._copy(self._state.employees.get(employee_id))

    def list_employee_records(self) -> list[dict]:
        return [copy.deepcopy(row) for row in self._state.employees.values()]

    def get_employee_by_email(self, email: str) -> dict | None:
        for employee in self._state.employees.values():
            if employee.get("email") == email:
                return copy.deepcopy(employee)
        return None

    def create_employee(self, data: dict) -> dict:
        employee_id = self._state.next_employee_id
        self._state.next_employee_id += 1
        row = {
            **copy.deepcopy(data),
            "id": employee_id,
            "status": data.get("status") or "active",
            "phone": data.get("phone"),
            "created_at": datetime.now(timezone.utc),
        }
        self._state.employees[employee_id] = row
        return copy.deepcopy(row)

    def update_employee(self, employee_id: int, changes: dict) -> dict | None:
        existing = self._state.employees.get(employee_id)
        if existing is None:
            return None
        existing.update(copy.deepcopy(changes))
        return copy.deepcopy(existing)

    def delete_employee(self, employee_id: int) -> bool:
        return self._state.employees.pop(employee_id, None) is not None

    # ------------------------------------------------------------------
    # payslips
    # ------------------------------------------------------------------
    def _with_employee(self, payslip: dict) -> dict | None:
        employee = self._state.employees.get(payslip.get("employee_id"))
        if employee is None:
            return None
        return {**copy.deepcopy(payslip), "employee": copy.deepcopy(employee)}

    def list_payslips(self) -> list[dict]:
        rows: list[dict] = []
        for payslip in self._state.payslips.values():
            row = self._with_employee(payslip)
            if row is not None:
                rows.append(row)
        rows.sort(key=lambda item: (item["created_at"], item["id"]), reverse=True)
        return rows

    def get_payslip(self, payslip_id: int) -> dict | None:
        payslip = self._state.payslips.get(payslip_id)
        if payslip is None:
            return None
        return self._with_employee(payslip)

    def list_payslips_for_employee(self, employee_id: int) -> list[dict]:
        return [
            copy.deepcopy(row)
            for row in self._state.payslips.values()
            if row.get("employee_id") == employee_id
        ]

    def create_payslip(self, data: dict) -> dict:
        payslip_id = self._state.next_payslip_id
        self._state.next_payslip_id += 1
        row = {
            **copy.deepcopy(data),
            "id": payslip_id,
            "status": data.get("status") or "generated",
            "created_at": datetime.now(timezone.utc),
        }
        self._state.payslips[payslip_id] = row
        return copy.deepcopy(row)

    def update_payslip(self, payslip_id: int, changes: dict) -> dict | None:
        existing = self._state.payslips.get(payslip_id)
        if existing is None:
            return None
        existing.update(copy.deepcopy(changes))
        return copy.deepcopy(existing)

    def delete_payslip(self, payslip_id: int) -> bool:
        return self._state.payslips.pop(payslip_id, None) is not None

    # ------------------------------------------------------------------
    # testing helpers
    # ------------------------------------------------------------------
    def reset(self) -> None:
        self._state = HRState()
