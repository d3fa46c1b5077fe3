from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from hrdesk.application import HRService
from hrdesk.core.schema import EmployeeCreate, EmployeeUpdate
from hrdesk.routes.dependencies import get_hr_service

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("")
async def list_employees(service: HRService = Depends(get_hr_service)) -> list[dict]:
    return service.list_employees()


@router.get("/{employee_id}")
async def get_employee(employee_id: int, service: HRService = Depends(get_hr_service)) -> dict:
    employee = service.get_employee(employee_id)
    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")
    return employee


@router.post("", status_code=201)
async def create_employee(payload: EmployeeCreate, service: HRService = Depends(get_hr_service)) -> dict:
    """Create an employee after checking email uniqueness and the role's salary band."""
    return service.create_employee(payload)


@router.put("/{employee_id}")
async def update_employee(
    employee_id: int,
    payload: EmployeeUpdate,
    service: HRService = Depends(get_hr_service),
) -> dict:
    employee = service.update_employee(employee_id, payload)
    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")
    return employee


@router.delete("/{employee_id}")
async def delete_employee(employee_id: int, service: HRService = Depends(get_hr_service)) -> dict:
    if not service.delete_employee(employee_id):
        raise HTTPException(status_code=404, detail="Employee not found")
    return {"message": "Employee deleted successfully"}


@router.get("/{employee_id}/payslips")
async def list_employee_payslips(employee_id: int, service: HRService = Depends(get_hr_service)) -> list[dict]:
    return service.list_payslips_for_employee(employee_id)
