from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from employee_api.core.dependencies import get_employee_service
from employee_api.services.employee_service import EmployeeService

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health_check(request: Request, service: EmployeeService = Depends(get_employee_service)):  # noqa: B008
    return {
        "status": "healthy",
        "version": request.app.version,
        "store": service.stats(),
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
