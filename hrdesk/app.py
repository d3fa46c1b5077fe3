import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hrdesk.application import HRService
from hrdesk.core.pay_policy import load_pay_policy
from hrdesk.core.validation import ValidationError
from hrdesk.domain import UnknownEmployeeKind, UnknownEmployeeType
from hrdesk.infrastructure import InMemoryHRRepository
from hrdesk.routes import employees, payslips, reports, roles

logger = logging.getLogger(__name__)

TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in TRUTHY


def _configure_logging() -> None:
    level = os.getenv("HRDESK_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_service() -> HRService:
    service = HRService(
        InMemoryHRRepository(),
        policy=load_pay_policy(),
        validate_salary_on_update=_env_flag("HRDESK_VALIDATE_SALARY_ON_UPDATE", "0"),
    )
    if _env_flag("HRDESK_SEED_SAMPLE_ROLES", "1"):
        seeded = service.seed_sample_roles()
        logger.info("seeded %d sample roles", seeded)
    return service


def create_app(service: HRService | None = None) -> FastAPI:
    _configure_logging()
    app = FastAPI(title="HR Desk API", version="0.1.0")
    app.state.hr_service = service or build_service()

    origins_env = os.getenv("API_CORS_ORIGINS", "")
    origins = [origin.strip() for origin in origins_env.split(",") if origin.strip()]
    if not origins:
        origins = ["http://localhost:3000", "http://127.0.0.1:3000"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(UnknownEmployeeKind)
    @app.exception_handler(UnknownEmployeeType)
    async def handle_unknown_employee(request: Request, exc: Exception) -> JSONResponse:
        logger.error("cannot price employee record on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    app.include_router(roles.router, prefix="/api")
    app.include_router(employees.router, prefix="/api")
    app.include_router(payslips.router, prefix="/api")
    app.include_router(reports.router, prefix="/api")

    @app.get("/", include_in_schema=False)
    async def root() -> JSONResponse:
        """Provide a lightweight landing page for container checks."""
        return JSONResponse(
            {
                "message": "HR Desk API",
                "docs": "/docs",
                "health": "/api/stats",
            }
        )

    return app


app = create_app()
