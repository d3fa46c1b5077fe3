from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from hrdesk.application import HRService
from hrdesk.core.schema import ResponsibilityChange, RoleCreate, RoleUpdate
from hrdesk.routes.dependencies import get_hr_service

router = APIRouter(prefix="/roles", tags=["roles"])


@router.get("")
async def list_roles(service: HRService = Depends(get_hr_service)) -> list[dict]:
    return service.list_roles()


@router.get("/{role_id}")
async def get_role(role_id: int, service: HRService = Depends(get_hr_service)) -> dict:
    role = service.get_role(role_id)
    if not role:
        raise HTTPException(status_code=404, detail="Role not found")
    return role


@router.post("", status_code=201)
async def create_role(payload: RoleCreate, service: HRService = Depends(get_hr_service)) -> dict:
    return service.create_role(payload)


@router.put("/{role_id}")
async def update_role(role_id: int, payload: RoleUpdate, service: HRService = Depends(get_hr_service)) -> dict:
    role = service.update_role(role_id, payload)
    if not role:
        raise HTTPException(status_code=404, detail="Role not found")
    return role


@router.delete("/{role_id}")
async def delete_role(role_id: int, service: HRService = Depends(get_hr_service)) -> dict:
    if not service.delete_role(role_id):
        raise HTTPException(status_code=404, detail="Role not found")
    return {"message": "Role deleted successfully"}


@router.post("/{role_id}/responsibilities")
async def add_responsibility(
    role_id: int,
    payload: ResponsibilityChange,
    service: HRService = Depends(get_hr_service),
) -> dict:
    role = service.add_responsibility(role_id, payload.responsibility)
    if not role:
        raise HTTPException(status_code=404, detail="Role not found")
    return role


@router.delete("/{role_id}/responsibilities")
async def remove_responsibility(
    role_id: int,
    payload: ResponsibilityChange,
    service: HRService = Depends(get_hr_service),
) -> dict:
    role = service.remove_responsibility(role_id, payload.responsibility)
    if not role:
        raise HTTPException(status_code=404, detail="Role not found")
    return role
