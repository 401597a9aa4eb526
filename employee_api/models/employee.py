"""Employee and benefit entities held by the repository."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal


class BenefitType(str, Enum):
    HEALTH = "Health"
    DENTAL = "Dental"
    VISION = "Vision"


class EmployeeBenefit(BaseModel):
    """A benefit owned by exactly one employee."""

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    id: int | None = None
    employee_id: int | None = None
    benefit_type: BenefitType
    cost: Decimal = Field(..., ge=0)


class Employee(BaseModel):
    """Stored employee record.

    ``id`` stays ``None`` until the repository assigns one on create.
    """

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    id: int | None = None
    first_name: str
    last_name: str
    social_security_number: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    phone_number: str | None = None
    email: str | None = None
    benefits: list[EmployeeBenefit] = Field(default_factory=list)
