from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from hrdesk.application import HRService
from hrdesk.core.schema import PayslipCalculationRequest, PayslipCreate, PayslipStatusUpdate
from hrdesk.routes.dependencies import get_hr_service

router = APIRouter(prefix="/payslips", tags=["payslips"])


@router.get("")
async def list_payslips(service: HRService = Depends(get_hr_service)) -> list[dict]:
    return service.list_payslips()


@router.post("/calculate")
async def calculate_payslip(
    payload: PayslipCalculationRequest,
    service: HRService = Depends(get_hr_service),
) -> dict:
    """Preview a payslip for an employee without storing it."""
    result = service.calculate_payslip(payload)
    if result is None:
        raise HTTPException(status_code=404, detail="Employee not found")
    return result.model_dump()


@router.get("/{payslip_id}")
async def get_payslip(payslip_id: int, service: HRService = Depends(get_hr_service)) -> dict:
    payslip = service.get_payslip(payslip_id)
    if not payslip:
        raise HTTPException(status_code=404, detail="Payslip not found")
    return payslip


@router.post("", status_code=201)
async def create_payslip(payload: PayslipCreate, service: HRService = Depends(get_hr_service)) -> dict:
    return service.create_payslip(payload)


@router.put("/{payslip_id}")
async def update_payslip(
    payslip_id: int,
    payload: PayslipStatusUpdate,
    service: HRService = Depends(get_hr_service),
) -> dict:
    payslip = service.update_payslip_status(payslip_id, payload.status)
    if not payslip:
        raise HTTPException(status_code=404, detail="Payslip not found")
    return payslip


@router.delete("/{payslip_id}")
async def delete_payslip(payslip_id: int, service: HRService = Depends(get_hr_service)) -> dict:
    if not service.delete_payslip(payslip_id):
        raise HTTPException(status_code=404, detail="Payslip not found")
    return {"message": "Payslip deleted successfully"}
