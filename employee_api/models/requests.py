"""Request and response shapes for the employee endpoints."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal

from employee_api.models.employee import BenefitType


class _PascalModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)


class CreateEmployeeBenefitRequest(_PascalModel):
    benefit_type: BenefitType
    cost: Decimal = Field(..., ge=0)


class CreateEmployeeRequest(_PascalModel):
    """Body of ``POST /employees``.

    Every field is optional at the decoding stage so that missing names are
    reported by the validator with field-keyed messages instead of a generic
    decoding error.
    """

    first_name: str | None = None
    last_name: str | None = None
    social_security_number: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    phone_number: str | None = None
    email: str | None = None
    benefits: list[CreateEmployeeBenefitRequest] | None = None


class UpdateEmployeeRequest(_PascalModel):
    """Body of ``PUT /employees/{id}``: address and contact fields only."""

    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    phone_number: str | None = None
    email: str | None = None


class BenefitResponse(_PascalModel):
    id: int
    employee_id: int
    benefit_type: BenefitType
    cost: Decimal


class EmployeeResponse(_PascalModel):
    """Read projection of an employee. Never carries the SSN or the ID."""

    first_name: str
    last_name: str
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    phone_number: str | None = None
    email: str | None = None
    benefits: list[BenefitResponse] = Field(default_factory=list)
