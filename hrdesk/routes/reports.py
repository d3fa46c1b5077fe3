from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, Query
from fastapi.responses import FileResponse

from hrdesk.application import HRService
from hrdesk.routes.dependencies import get_hr_service

router = APIRouter(tags=["reports"])

MEDIA_TYPES = {
    "csv": "text/csv",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}


def _download(path: Path) -> FileResponse:
    suffix = path.suffix.lstrip(".")
    return FileResponse(path, media_type=MEDIA_TYPES.get(suffix), filename=path.name)


@router.get("/stats")
async def get_stats(service: HRService = Depends(get_hr_service)) -> dict:
    return service.get_stats().model_dump()


@router.get("/reports/payslips")
async def export_payslips(
    fmt: str = Query(default="csv", alias="format"),
    service: HRService = Depends(get_hr_service),
) -> FileResponse:
    return _download(service.export_payslip_register(fmt))


@router.get("/reports/bank-transfers")
async def export_bank_transfers(
    fmt: str = Query(default="csv", alias="format"),
    service: HRService = Depends(get_hr_service),
) -> FileResponse:
    return _download(service.export_bank_transfers(fmt))
