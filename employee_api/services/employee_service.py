"""Employee resource handling: validate, persist, project."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fastapi import status

from employee_api.models.employee import Employee, EmployeeBenefit
from employee_api.models.requests import (
    BenefitResponse,
    CreateEmployeeRequest,
    EmployeeResponse,
    UpdateEmployeeRequest,
)
from employee_api.services.repository import Repository, RepositoryError
from employee_api.services.validation import (
    ValidationResult,
    validate_create_employee,
    validate_update_employee,
)

logger = logging.getLogger(__name__)

UPDATE_FAILED_MESSAGE = "An error occurred while updating the employee"

# Fields an update request is allowed to overwrite on an existing employee
_UPDATABLE_FIELDS: tuple[str, ...] = (
    "address1",
    "address2",
    "city",
    "state",
    "zip_code",
    "phone_number",
    "email",
)


@dataclass
class Outcome:
    """Terminal result of one resource operation."""

    status_code: int
    body: Any = None
    errors: dict[str, list[str]] | None = None
    location: str | None = None

    @property
    def ok(self) -> bool:
        return self.status_code < 400


def _benefit_to_response(benefit: EmployeeBenefit) -> BenefitResponse:
    return BenefitResponse(
        id=benefit.id,
        employee_id=benefit.employee_id,
        benefit_type=benefit.benefit_type,
        cost=benefit.cost,
    )


def _employee_to_response(employee: Employee) -> EmployeeResponse:
    return EmployeeResponse(
        first_name=employee.first_name,
        last_name=employee.last_name,
        address1=employee.address1,
        address2=employee.address2,
        city=employee.city,
        state=employee.state,
        zip_code=employee.zip_code,
        phone_number=employee.phone_number,
        email=employee.email,
        benefits=[_benefit_to_response(b) for b in employee.benefits],
    )


class EmployeeService:
    def __init__(
        self,
        repository: Repository[Employee],
        validate_create: Callable[[CreateEmployeeRequest], ValidationResult] = validate_create_employee,
        validate_update: Callable[[UpdateEmployeeRequest], ValidationResult] = validate_update_employee,
    ) -> None:
        self.repository = repository
        self.validate_create = validate_create
        self.validate_update = validate_update

    def list_employees(self) -> Outcome:
        employees = [_employee_to_response(e) for e in self.repository.get_all()]
        return Outcome(status.HTTP_200_OK, body=employees)

    def get_employee(self, employee_id: int) -> Outcome:
        employee = self.repository.get_by_id(employee_id)
        if employee is None:
            return Outcome(status.HTTP_404_NOT_FOUND)
        return Outcome(status.HTTP_200_OK, body=_employee_to_response(employee))

    def create_employee(self, request: CreateEmployeeRequest) -> Outcome:
        result = self.validate_create(request)
        if not result.is_valid:
            logger.info("Rejected employee create: invalid fields %s", sorted(result.errors))
            return Outcome(status.HTTP_400_BAD_REQUEST, errors=result.errors)

        new_employee = Employee(
            first_name=request.first_name,
            last_name=request.last_name,
            social_security_number=request.social_security_number,
            address1=request.address1,
            address2=request.address2,
            city=request.city,
            state=request.state,
            zip_code=request.zip_code,
            phone_number=request.phone_number,
            email=request.email,
            benefits=[
                EmployeeBenefit(benefit_type=b.benefit_type, cost=b.cost)
                for b in request.benefits or []
            ],
        )
        created = self.repository.create(new_employee)
        logger.info("Created employee with ID: %s", created.id)

        return Outcome(
            status.HTTP_201_CREATED,
            body=_employee_to_response(created),
            location=f"/employees/{created.id}",
        )

    def update_employee(self, employee_id: int, request: UpdateEmployeeRequest) -> Outcome:
        logger.info("Updating employee with ID: %s", employee_id)

        result = self.validate_update(request)
        if not result.is_valid:
            logger.info(
                "Rejected update for employee %s: invalid fields %s",
                employee_id,
                sorted(result.errors),
            )
            return Outcome(status.HTTP_400_BAD_REQUEST, errors=result.errors)

        existing = self.repository.get_by_id(employee_id)
        if existing is None:
            logger.warning("Employee with ID: %s not found", employee_id)
            return Outcome(status.HTTP_404_NOT_FOUND)

        logger.debug("Updating employee details for ID: %s", employee_id)
        for name in _UPDATABLE_FIELDS:
            setattr(existing, name, getattr(request, name))

        try:
            self.repository.update(existing)
        except RepositoryError:
            logger.exception("Error occurred while updating employee with ID: %s", employee_id)
            return Outcome(status.HTTP_500_INTERNAL_SERVER_ERROR, body=UPDATE_FAILED_MESSAGE)

        logger.info("Employee with ID: %s successfully updated", employee_id)
        return Outcome(status.HTTP_200_OK, body=_employee_to_response(existing))

    def list_benefits(self, employee_id: int) -> Outcome:
        employee = self.repository.get_by_id(employee_id)
        if employee is None:
            return Outcome(status.HTTP_404_NOT_FOUND)
        return Outcome(
            status.HTTP_200_OK,
            body=[_benefit_to_response(b) for b in employee.benefits],
        )

    def stats(self) -> dict[str, int]:
        return {"employees": self.repository.count()}
