from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import JSONResponse

from employee_api.core.dependencies import get_employee_service
from employee_api.models.requests import (
    BenefitResponse,
    CreateEmployeeRequest,
    EmployeeResponse,
    UpdateEmployeeRequest,
)
from employee_api.services.employee_service import EmployeeService, Outcome

router = APIRouter(prefix="/employees", tags=["employees"])


def _unwrap(outcome: Outcome, not_found_detail: str = "Employee not found"):
    if outcome.status_code == status.HTTP_400_BAD_REQUEST:
        return JSONResponse(status_code=outcome.status_code, content=outcome.errors)
    if outcome.status_code == status.HTTP_404_NOT_FOUND:
        raise HTTPException(status_code=outcome.status_code, detail=not_found_detail)
    if not outcome.ok:
        raise HTTPException(status_code=outcome.status_code, detail=outcome.body)
    return outcome.body


@router.get("", response_model=list[EmployeeResponse])
def list_employees(service: EmployeeService = Depends(get_employee_service)):  # noqa: B008
    """Gets all of the employees in the system."""
    return _unwrap(service.list_employees())


@router.get("/{employee_id:int}", response_model=EmployeeResponse)
def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    """Gets an employee by ID."""
    return _unwrap(
        service.get_employee(employee_id),
        not_found_detail=f"Employee with ID '{employee_id}' not found",
    )


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def create_employee(
    request: CreateEmployeeRequest,
    response: Response,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    """Creates a new employee and returns a link to it in ``Location``."""
    outcome = service.create_employee(request)
    if outcome.location:
        response.headers["Location"] = outcome.location
    return _unwrap(outcome)


@router.put("/{employee_id:int}", response_model=EmployeeResponse)
def update_employee(
    employee_id: int,
    request: UpdateEmployeeRequest,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    """Updates the address and contact details of an employee."""
    return _unwrap(
        service.update_employee(employee_id, request),
        not_found_detail=f"Employee with ID '{employee_id}' not found",
    )


@router.get("/{employee_id:int}/benefits", response_model=list[BenefitResponse])
def list_employee_benefits(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    """Gets the benefits for an employee."""
    return _unwrap(
        service.list_benefits(employee_id),
        not_found_detail=f"Employee with ID '{employee_id}' not found",
    )
