from __future__ import annotations

from fastapi import Request

from employee_api.services.employee_service import EmployeeService


def get_employee_service(request: Request) -> EmployeeService:
    return request.app.state.employee_service
