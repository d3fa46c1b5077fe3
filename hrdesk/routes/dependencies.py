from __future__ import annotations

from fastapi import Request

from hrdesk.application import HRService


def get_hr_service(request: Request) -> HRService:
    """Return the service bound to the running application."""

    return request.app.state.hr_service
